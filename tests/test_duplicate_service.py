"""
Tests for DuplicateService: keep the first path of each group, remove the rest.
"""
from unittest.mock import Mock

from dupehunt.core.models import DuplicateGroup
from dupehunt.services.duplicate_service import DuplicateService, RemovalResult
from dupehunt.services.file_service import FileService


class TestKeepOnlyOne:

    def test_marks_every_path_but_the_first(self):
        groups = [DuplicateGroup("h1", ["/a", "/b", "/c"]), DuplicateGroup("h2", ["/d", "/e"])]
        assert DuplicateService.keep_only_one_file_per_group(groups) == ["/b", "/c", "/e"]

    def test_plan_does_not_change_groups(self):
        groups = [DuplicateGroup("h1", ["/a", "/b"])]
        DuplicateService.keep_only_one_file_per_group(groups)
        assert groups[0].paths == ["/a", "/b"]


class TestRemoveDuplicates:

    def test_three_file_group_keeps_first(self, tmp_path):
        paths = []
        for name in ("first", "second", "third"):
            path = tmp_path / name
            path.write_bytes(b"same content")
            paths.append(str(path))

        result = DuplicateService.remove_duplicates(
            [DuplicateGroup("h", paths)],
            delete=FileService.delete_file,
            size_of=lambda p: FileService.describe(p).size,
        )

        assert result.deleted == paths[1:]
        assert (tmp_path / "first").exists()
        assert not (tmp_path / "second").exists()
        assert not (tmp_path / "third").exists()
        assert result.bytes_freed == 2 * len(b"same content")
        assert result.failed == []

    def test_declined_prompt_skips_only_that_file(self):
        delete = Mock()
        confirm = Mock(side_effect=lambda group, path: path != "/b")

        result = DuplicateService.remove_duplicates(
            [DuplicateGroup("h", ["/a", "/b", "/c"])], delete=delete, confirm=confirm
        )

        assert result.declined == ["/b"]
        assert result.deleted == ["/c"]
        delete.assert_called_once_with("/c")
        assert confirm.call_count == 2

    def test_kept_file_is_never_offered(self):
        confirm = Mock(return_value=True)
        DuplicateService.remove_duplicates([DuplicateGroup("h", ["/a", "/b"])], delete=Mock(), confirm=confirm)
        assert [c.args[1] for c in confirm.call_args_list] == ["/b"]

    def test_failure_does_not_stop_removal(self, caplog):
        def delete(path):
            if path == "/b":
                raise RuntimeError("permission denied")

        result = DuplicateService.remove_duplicates(
            [DuplicateGroup("h1", ["/a", "/b", "/c"]), DuplicateGroup("h2", ["/d", "/e"])],
            delete=delete,
            size_of=lambda p: 10,
        )

        assert result.deleted == ["/c", "/e"]
        assert result.failed == [("/b", "permission denied")]
        assert result.attempted == 3
        assert result.bytes_freed == 20
        assert "/b" in caplog.text

    def test_unknown_size_is_not_counted(self):
        result = DuplicateService.remove_duplicates(
            [DuplicateGroup("h", ["/a", "/b"])], delete=Mock(), size_of=lambda p: None
        )
        assert result.bytes_freed == 0
        assert result.deleted == ["/b"]

    def test_no_groups(self):
        assert DuplicateService.remove_duplicates([], delete=Mock()) == RemovalResult()
