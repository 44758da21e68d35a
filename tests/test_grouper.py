"""
Unit tests for DuplicateGrouperImpl and Sorter.
Verifies merge of per-worker maps, removal of singleton groups,
and encounter-order preservation inside groups.
"""
import pytest

from dupehunt.core.grouper import DuplicateGrouperImpl
from dupehunt.core.models import DuplicateGroup, SortOrder
from dupehunt.core.sorter import Sorter


class TestMerge:
    """Union of disjoint maps, preserving list order."""

    def test_merge_preserves_order(self):
        merged = DuplicateGrouperImpl.merge([{"/a": "1", "/b": "2"}, {"/c": "1"}])
        assert list(merged.items()) == [("/a", "1"), ("/b", "2"), ("/c", "1")]

    def test_merge_of_nothing(self):
        assert DuplicateGrouperImpl.merge([]) == {}

    def test_overlapping_maps_are_rejected(self):
        with pytest.raises(RuntimeError, match="/a"):
            DuplicateGrouperImpl.merge([{"/a": "1"}, {"/a": "1"}])


class TestGroup:
    """Inverse image of the hash map restricted to hashes with 2+ paths."""

    def test_filters_single_files(self):
        groups = DuplicateGrouperImpl().group({
            "/dup1.txt": "aaaa",
            "/unique.txt": "bbbb",
            "/dup2.txt": "aaaa",
        })

        assert len(groups) == 1
        assert groups[0].hash == "aaaa"
        assert groups[0].paths == ["/dup1.txt", "/dup2.txt"]

    def test_every_shared_hash_path_in_exactly_one_group(self):
        file_hashes = {f"/f{i}": str(i % 3) for i in range(10)}
        file_hashes["/lonely"] = "unique"

        groups = DuplicateGrouperImpl().group(file_hashes)
        grouped = [p for g in groups for p in g.paths]

        assert all(g.duplicate_count >= 2 for g in groups)
        assert len(grouped) == len(set(grouped)) == 10
        assert "/lonely" not in grouped

    def test_group_and_member_order_follow_encounter_order(self):
        groups = DuplicateGrouperImpl().group({
            "/z": "2",
            "/b": "1",
            "/a": "2",
            "/y": "1",
        })
        assert [(g.hash, g.paths) for g in groups] == [("2", ["/z", "/a"]), ("1", ["/b", "/y"])]

    def test_no_duplicates(self):
        assert DuplicateGrouperImpl().group({"/a": "1", "/b": "2"}) == []

    def test_hash_equality_is_exact_string_match(self):
        groups = DuplicateGrouperImpl().group({"/a": "ABCD", "/b": "abcd"})
        assert groups == []

    def test_path_sort_order(self):
        groups = DuplicateGrouperImpl(SortOrder.PATH).group({"/z": "1", "/a": "1", "/m": "1"})
        assert groups[0].paths == ["/a", "/m", "/z"]


class TestSorter:
    """Ordering policies inside groups."""

    def test_discovery_keeps_order(self):
        group = DuplicateGroup(hash="h", paths=["/b", "/a"])
        Sorter.sort_paths_inside_groups([group], SortOrder.DISCOVERY)
        assert group.paths == ["/b", "/a"]

    def test_shortest_path_then_alphabetical(self):
        group = DuplicateGroup(hash="h", paths=["/x/y/deep", "/b/shallow", "/a/shallow"])
        Sorter.sort_paths_inside_groups([group], SortOrder.SHORTEST_PATH)
        assert group.paths == ["/a/shallow", "/b/shallow", "/x/y/deep"]

    def test_empty_input(self):
        Sorter.sort_paths_inside_groups([], SortOrder.PATH)


class TestDuplicateGroupModel:

    def test_kept_and_redundant(self):
        group = DuplicateGroup(hash="h", paths=["/1", "/2", "/3"])
        assert group.kept == "/1"
        assert group.redundant == ["/2", "/3"]
        assert group.duplicate_count == 3
