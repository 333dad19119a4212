"""Tests for recursive folder size accounting."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from nextclean.cache.size import folder_size


def _write(path: Path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


class TestFolderSize:
    """Tests for folder_size."""

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory has size zero."""
        assert folder_size(str(tmp_path)) == 0

    def test_sums_nested_files(self, tmp_path: Path) -> None:
        """Files at every depth are counted."""
        _write(tmp_path / "a.bin", 100)
        _write(tmp_path / "sub" / "b.bin", 200)
        _write(tmp_path / "sub" / "deeper" / "c.bin", 300)

        assert folder_size(str(tmp_path)) == 600

    def test_additive_over_children(self, tmp_path: Path) -> None:
        """Size equals direct files plus the size of each direct subdirectory."""
        _write(tmp_path / "top.bin", 7)
        _write(tmp_path / "one" / "x.bin", 11)
        _write(tmp_path / "two" / "y" / "z.bin", 13)

        direct_files = sum(
            p.stat().st_size for p in tmp_path.iterdir() if p.is_file()
        )
        subdirs = sum(folder_size(str(p)) for p in tmp_path.iterdir() if p.is_dir())

        assert folder_size(str(tmp_path)) == direct_files + subdirs == 31

    def test_missing_directory_counts_zero(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A directory that cannot be listed contributes zero and is logged."""
        missing = tmp_path / "gone"

        with caplog.at_level(logging.ERROR, logger="nextclean"):
            assert folder_size(str(missing)) == 0

        assert f"calculating folder size ({missing})" in caplog.text

    def test_unreadable_entry_does_not_abort_sum(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """One entry failing to stat contributes zero; siblings still count."""
        _write(tmp_path / "good.bin", 50)
        _write(tmp_path / "bad.bin", 1000)
        bad = str(tmp_path / "bad.bin")
        real_lstat = os.lstat

        def flaky_lstat(path: str, *args: object, **kwargs: object) -> os.stat_result:
            if str(path) == bad:
                raise PermissionError(13, "Permission denied", bad)
            return real_lstat(path, *args, **kwargs)  # type: ignore[arg-type]

        with (
            patch("nextclean.cache.size.os.lstat", side_effect=flaky_lstat),
            caplog.at_level(logging.ERROR, logger="nextclean"),
        ):
            total = folder_size(str(tmp_path))

        assert total == 50
        assert "bad.bin" in caplog.text

    def test_unlistable_subdirectory_counts_zero(self, tmp_path: Path) -> None:
        """A subdirectory that cannot be listed contributes zero."""
        _write(tmp_path / "keep.bin", 5)
        _write(tmp_path / "locked" / "hidden.bin", 500)
        locked = str(tmp_path / "locked")
        real_listdir = os.listdir

        def flaky_listdir(path: str) -> list[str]:
            if str(path) == locked:
                raise PermissionError(13, "Permission denied", locked)
            return real_listdir(path)

        with patch("nextclean.cache.size.os.listdir", side_effect=flaky_listdir):
            assert folder_size(str(tmp_path)) == 5

    def test_symlinks_not_followed(self, tmp_path: Path) -> None:
        """A symlinked directory counts as the link itself, not its target."""
        outside = tmp_path / "outside"
        _write(outside / "huge.bin", 10_000)
        measured = tmp_path / "measured"
        _write(measured / "small.bin", 10)
        link = measured / "link"
        link.symlink_to(outside, target_is_directory=True)

        expected = 10 + os.lstat(link).st_size
        assert folder_size(str(measured)) == expected
