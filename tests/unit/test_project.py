"""Tests for project folder access."""

from pathlib import Path

import pytest

from build_planner.project import ProjectFolder


class TestProjectFolder:
    """Test suite for ProjectFolder."""

    def test_exists_and_read(self, make_project) -> None:
        """Test that paths are relative to the project folder."""
        project = ProjectFolder(make_project({"cmd.R": "print(1)\n"}))

        assert project.exists("cmd.R")
        assert not project.exists("main.R")
        assert project.read("cmd.R") == "print(1)\n"

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        """Test that write creates missing directories."""
        ProjectFolder(tmp_path).write("sub/dir/file.txt", "x")
        assert (tmp_path / "sub" / "dir" / "file.txt").read_text() == "x"

    def test_glob_is_sorted_and_relative(self, make_project) -> None:
        """Test that glob returns sorted POSIX paths relative to the root."""
        folder = make_project({"b.R": "", "a/z.R": "", "a.R": "", "notes.txt": ""})
        assert ProjectFolder(folder).glob("**/*.R") == ["a.R", "a/z.R", "b.R"]

    def test_glob_skips_hidden_paths(self, make_project) -> None:
        """Test that files in hidden directories or with hidden names are left out."""
        folder = make_project({".Rproj.user/x/snap.R": "", ".hidden.R": "", "main.R": ""})
        assert ProjectFolder(folder).glob("**/*.R") == ["main.R"]

    def test_glob_no_matches(self, tmp_path: Path) -> None:
        """Test that glob returns an empty list without matches."""
        assert ProjectFolder(tmp_path).glob("**/*.R") == []

    @pytest.mark.parametrize(
        "version,codename",
        [("16.04", "xenial"), ("18.04", "bionic"), (16.04, "xenial")],
    )
    def test_sys_version_name(self, version, codename) -> None:
        """Test Ubuntu version to codename mapping."""
        assert ProjectFolder.sys_version_name(version) == codename

    def test_sys_version_name_unknown(self) -> None:
        """Test that unknown versions are rejected."""
        with pytest.raises(ValueError, match="Unknown Ubuntu version"):
            ProjectFolder.sys_version_name("15.10")
