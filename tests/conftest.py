"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import logging
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so the 'dupehunt' package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - 3 copies of 1KB of 'A' (two at top level, one in subdir)
    - 2 copies of 2KB of 'B'
    - 2 unique files
    - 1 empty file
    - 1 .tmp file with unique content
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty"] = temp_dir / "empty.txt"
    files["empty"].write_bytes(b"")

    files["tmp"] = temp_dir / "ignore.tmp"
    files["tmp"].write_bytes(b"E" * 1024)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)  # Same as dup1_a/b

    return files


@pytest.fixture
def make_tree():
    """
    Factory writing `count` files named f000.bin... whose content cycles through `distinct` payloads.
    Returns their paths.
    """
    def _make(root: Path, count: int, distinct: int) -> list:
        root.mkdir(parents=True, exist_ok=True)
        paths = []
        for i in range(count):
            path = root / f"f{i:03d}.bin"
            path.write_bytes(f"payload-{i % distinct}".encode() * 64)
            paths.append(path)
        return paths
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI configures logging; undo it so caplog sees warnings in every test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    logging.getLogger("dupehunt").setLevel(logging.NOTSET)
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
