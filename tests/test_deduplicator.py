"""
Integration tests for DeduplicatorImpl.
Checks grouping over real files and that the outcome does not depend on the worker count.
"""
import os

import pytest

from dupehunt.core.deduplicator import DeduplicatorImpl
from dupehunt.core.hasher import HasherImpl, get_algorithm
from dupehunt.core.models import SortOrder, Stage
from dupehunt.core.scanner import FileScannerImpl


def group_sets(groups):
    return {frozenset(g.paths) for g in groups}


class TestFindDuplicates:
    """Grouping over real files."""

    def test_two_identical_and_one_distinct(self, temp_dir):
        for name, content in (("a", b"X"), ("b", b"X"), ("c", b"Y")):
            (temp_dir / name).write_bytes(content)
        paths = [str(temp_dir / n) for n in ("a", "b", "c")]

        groups, stats = DeduplicatorImpl().find_duplicates(paths, threads=2)

        assert len(groups) == 1
        assert groups[0].paths == paths[:2]
        assert stats.files_hashed == 3
        assert stats.skipped == []

    def test_groups_from_test_files(self, test_files, temp_dir):
        paths = FileScannerImpl(roots=[str(temp_dir)], working_dir=str(temp_dir)).scan()
        groups, _ = DeduplicatorImpl().find_duplicates(paths, threads=3)

        assert group_sets(groups) == {
            frozenset(str(test_files[k]) for k in ("dup1_a", "dup1_b", "sub_dup")),
            frozenset(str(test_files[k]) for k in ("dup2_a", "dup2_b")),
        }

    def test_no_duplicates(self, temp_dir):
        (temp_dir / "a").write_bytes(b"1")
        (temp_dir / "b").write_bytes(b"2")
        groups, _ = DeduplicatorImpl().find_duplicates([str(temp_dir / "a"), str(temp_dir / "b")], threads=1)
        assert groups == []

    def test_empty_files_form_a_group(self, temp_dir):
        (temp_dir / "e1").write_bytes(b"")
        (temp_dir / "e2").write_bytes(b"")
        groups, _ = DeduplicatorImpl().find_duplicates([str(temp_dir / "e1"), str(temp_dir / "e2")], threads=1)
        assert len(groups) == 1

    def test_unreadable_file_is_skipped(self, temp_dir):
        (temp_dir / "a").write_bytes(b"same")
        (temp_dir / "b").write_bytes(b"same")
        vanished = str(temp_dir / "vanished")
        paths = [str(temp_dir / "a"), vanished, str(temp_dir / "b")]

        groups, stats = DeduplicatorImpl().find_duplicates(paths, threads=3)

        assert [g.paths for g in groups] == [[str(temp_dir / "a"), str(temp_dir / "b")]]
        assert [s.path for s in stats.skipped] == [vanished]
        assert stats.files_hashed == 2

    def test_stage_stats_recorded(self, temp_dir):
        (temp_dir / "a").write_bytes(b"x")
        _, stats = DeduplicatorImpl().find_duplicates([str(temp_dir / "a")], threads=4)

        assert stats.workers == 1
        for stage in (Stage.PARTITION, Stage.HASH, Stage.GROUP):
            assert stage.value in stats.stage_stats

    @pytest.mark.parametrize("algorithm", ["crc32", "md5", "sha256", "xxh3", "blake3"])
    def test_any_algorithm_finds_the_same_groups(self, temp_dir, make_tree, algorithm):
        paths = [str(p) for p in make_tree(temp_dir, 12, 4)]
        reference, _ = DeduplicatorImpl().find_duplicates(paths, threads=1)
        groups, _ = DeduplicatorImpl(HasherImpl(get_algorithm(algorithm))).find_duplicates(paths, threads=2)
        assert group_sets(groups) == group_sets(reference)


class TestWorkerCountIndependence:
    """Same candidates, any worker count: same groups, same order."""

    def test_groups_identical_for_any_worker_count(self, temp_dir, make_tree):
        paths = [str(p) for p in make_tree(temp_dir, 25, 6)]

        baseline, _ = DeduplicatorImpl().find_duplicates(paths, threads=1)
        assert len(baseline) == 6

        for threads in (2, 4, 7, len(paths), len(paths) + 5):
            groups, _ = DeduplicatorImpl().find_duplicates(paths, threads=threads)
            assert [(g.hash, g.paths) for g in groups] == [(g.hash, g.paths) for g in baseline]

    def test_discovery_order_inside_groups(self, temp_dir, make_tree):
        paths = [str(p) for p in make_tree(temp_dir, 9, 3)]
        groups, _ = DeduplicatorImpl().find_duplicates(paths, threads=3)

        assert [g.paths for g in groups] == [
            [paths[0], paths[3], paths[6]],
            [paths[1], paths[4], paths[7]],
            [paths[2], paths[5], paths[8]],
        ]

    def test_repeated_runs_are_identical(self, temp_dir, make_tree):
        paths = [str(p) for p in make_tree(temp_dir, 16, 5)]
        first, _ = DeduplicatorImpl().find_duplicates(paths, threads=4)
        second, _ = DeduplicatorImpl().find_duplicates(paths, threads=4)
        assert [(g.hash, g.paths) for g in first] == [(g.hash, g.paths) for g in second]

    def test_shortest_path_order(self, temp_dir):
        deep = temp_dir / "x" / "y"
        deep.mkdir(parents=True)
        (deep / "copy").write_bytes(b"same")
        (temp_dir / "copy").write_bytes(b"same")
        paths = [str(deep / "copy"), str(temp_dir / "copy")]

        groups, _ = DeduplicatorImpl().find_duplicates(paths, threads=2, sort_order=SortOrder.SHORTEST_PATH)
        assert groups[0].kept == str(temp_dir / "copy")
        assert os.path.exists(groups[0].kept)
