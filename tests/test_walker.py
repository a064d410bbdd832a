"""
Unit tests for DirectoryWalkerImpl.
Verifies single-level listing, hidden filtering, symlink policy and soft failures.
"""
import hashlib
import os
from pathlib import Path

import pytest

from samehash.core.errors import FileReadError
from samehash.core.hasher import HasherImpl
from samehash.core.walker import DirectoryWalkerImpl
from conftest import dot_prefix_probe


class FailingHasher(HasherImpl):
    """Hasher that fails for selected paths as if they vanished mid-read."""

    def __init__(self, failing):
        super().__init__()
        self.failing = {str(p) for p in failing}

    def hash(self, path):
        if path in self.failing:
            raise FileReadError(path, PermissionError(13, "Permission denied"))
        return super().hash(path)


def make_walker(**kwargs) -> DirectoryWalkerImpl:
    kwargs.setdefault("hidden_probe", dot_prefix_probe)
    return DirectoryWalkerImpl(**kwargs)


class TestDirectoryWalker:
    """Test listing of exactly one directory."""

    def test_lists_files_and_subdirectories_without_descending(self, sample_tree):
        result = make_walker().walk(str(sample_tree["root"]))

        paths = [path for path, _ in result.files]
        assert paths == [str(sample_tree["a"]), str(sample_tree["b"]), str(sample_tree["c"])]
        assert result.subdirs == [str(sample_tree["sub"])]
        assert str(sample_tree["d"]) not in paths
        assert result.errors == []

    def test_files_are_paired_with_fingerprints(self, sample_tree):
        result = make_walker().walk(str(sample_tree["root"]))

        fingerprints = dict(result.files)
        assert fingerprints[str(sample_tree["a"])] == hashlib.sha256(b"hello").hexdigest()
        assert fingerprints[str(sample_tree["c"])] == hashlib.sha256(b"world").hexdigest()

    def test_children_are_returned_in_name_order(self, temp_dir):
        for name in ["zeta.txt", "alpha.txt", "mid.txt"]:
            (temp_dir / name).write_bytes(name.encode())

        result = make_walker().walk(str(temp_dir))

        assert [Path(p).name for p, _ in result.files] == ["alpha.txt", "mid.txt", "zeta.txt"]

    def test_counts_hashed_bytes(self, sample_tree):
        result = make_walker().walk(str(sample_tree["root"]))
        assert result.bytes_hashed == 15

    def test_hashed_bytes_are_counted_per_walk(self, sample_tree):
        """The hasher counter is cumulative; each result only carries its own listing."""
        hasher = FailingHasher([sample_tree["b"]])
        walker = make_walker(hasher=hasher)

        first = walker.walk(str(sample_tree["root"]))
        second = walker.walk(str(sample_tree["sub"]))

        assert first.bytes_hashed == 10
        assert second.bytes_hashed == 5
        assert hasher.bytes_read == 15

    def test_empty_directory(self, temp_dir):
        result = make_walker().walk(str(temp_dir))
        assert result.files == []
        assert result.subdirs == []

    def test_hidden_entries_skipped_by_default(self, deep_tree):
        result = make_walker().walk(str(deep_tree["root"]))

        paths = [p for p, _ in result.files]
        assert str(deep_tree["hidden_top"]) not in paths
        assert str(deep_tree["root"] / ".secret") not in result.subdirs
        assert str(deep_tree["top"]) in paths

    def test_hidden_entries_included_when_requested(self, deep_tree):
        result = make_walker(include_hidden=True).walk(str(deep_tree["root"]))

        paths = [p for p, _ in result.files]
        assert str(deep_tree["hidden_top"]) in paths
        assert str(deep_tree["root"] / ".secret") in result.subdirs

    def test_hidden_probe_receives_every_child(self, sample_tree):
        seen = []

        def probe(path, stat_result=None):
            seen.append(path)
            return False

        DirectoryWalkerImpl(hidden_probe=probe).walk(str(sample_tree["root"]))

        assert sorted(seen) == sorted([
            str(sample_tree["a"]), str(sample_tree["b"]),
            str(sample_tree["c"]), str(sample_tree["sub"])])

    def test_unreadable_file_is_skipped_and_listing_continues(self, sample_tree):
        """A per-file read failure never aborts the directory."""
        walker = make_walker(hasher=FailingHasher([sample_tree["b"]]))

        result = walker.walk(str(sample_tree["root"]))

        paths = [p for p, _ in result.files]
        assert paths == [str(sample_tree["a"]), str(sample_tree["c"])]
        assert len(result.errors) == 1
        assert result.errors[0].path == str(sample_tree["b"])

    def test_unreadable_file_is_logged_as_warning(self, sample_tree, caplog):
        walker = make_walker(hasher=FailingHasher([sample_tree["a"]]))

        with caplog.at_level("WARNING", logger="samehash.core.walker"):
            walker.walk(str(sample_tree["root"]))

        assert any(str(sample_tree["a"]) in rec.getMessage() for rec in caplog.records)

    def test_entry_vanishing_after_listing_is_skipped(self, sample_tree, monkeypatch):
        """An entry removed between listing and metadata read is a soft failure."""
        original_scandir = os.scandir
        victim = sample_tree["b"]

        def scandir_then_delete(path):
            it = original_scandir(path)
            entries = list(it)
            it.close()
            victim.unlink()
            return _ListContext(entries)

        monkeypatch.setattr(os, "scandir", scandir_then_delete)

        result = make_walker().walk(str(sample_tree["root"]))

        paths = [p for p, _ in result.files]
        assert str(victim) not in paths
        assert str(sample_tree["a"]) in paths
        assert str(sample_tree["c"]) in paths
        assert [e.path for e in result.errors] == [str(victim)]

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            make_walker().walk(str(temp_dir / "nope"))

    def test_file_instead_of_directory_raises(self, sample_tree):
        with pytest.raises(NotADirectoryError):
            make_walker().walk(str(sample_tree["a"]))


class TestSymlinksAndSpecialFiles:
    """Links are skipped unless followed; special files are never read."""

    @pytest.fixture
    def linked_tree(self, temp_dir):
        real = temp_dir / "real.txt"
        real.write_bytes(b"content")
        target_dir = temp_dir / "target"
        target_dir.mkdir()
        try:
            (temp_dir / "link.txt").symlink_to(real)
            (temp_dir / "link_dir").symlink_to(target_dir, target_is_directory=True)
            (temp_dir / "broken").symlink_to(temp_dir / "does_not_exist")
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")
        return temp_dir

    def test_symlinks_skipped_by_default(self, linked_tree):
        result = make_walker().walk(str(linked_tree))

        assert [Path(p).name for p, _ in result.files] == ["real.txt"]
        assert [Path(p).name for p in result.subdirs] == ["target"]
        assert result.errors == []

    def test_symlinks_followed_when_enabled(self, linked_tree):
        result = make_walker(follow_symlinks=True).walk(str(linked_tree))

        assert [Path(p).name for p, _ in result.files] == ["link.txt", "real.txt"]
        assert [Path(p).name for p in result.subdirs] == ["link_dir", "target"]
        # Broken link is a per-entry soft failure
        assert [Path(e.path).name for e in result.errors] == ["broken"]

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_fifo_is_never_read(self, temp_dir):
        os.mkfifo(temp_dir / "pipe")
        (temp_dir / "plain.txt").write_bytes(b"x")

        result = make_walker().walk(str(temp_dir))

        assert [Path(p).name for p, _ in result.files] == ["plain.txt"]


class _ListContext:
    """Context manager yielding a pre-materialized listing, mimicking os.scandir."""

    def __init__(self, entries):
        self._entries = entries

    def __enter__(self):
        return iter(self._entries)

    def __exit__(self, *exc):
        return False
