import os
import sys
from typing import Callable, Iterator

import pygit2
import pytest
from pytest_test_utils import TempDirFactory, TmpDir

from scmconfig.git import Git

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def isolate(tmp_dir_factory: TempDirFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_dir_factory.mktemp("mock")
    home_dir = path / "home"
    home_dir.mkdir()
    xdg_dir = home_dir / ".config"
    (xdg_dir / "git").mkdir(parents=True)
    system_dir = path / "system"
    system_dir.mkdir()

    if sys.platform == "win32":
        home_drive, home_path = os.path.splitdrive(home_dir)
        monkeypatch.setenv("USERPROFILE", str(home_dir))
        monkeypatch.setenv("HOMEDRIVE", home_drive)
        monkeypatch.setenv("HOMEPATH", home_path)
    else:
        monkeypatch.setenv("HOME", str(home_dir))

    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_dir))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    contents = b"""
[user]
name=SCM Tester
email=scmtester@example.com
[init]
defaultBranch=master
"""
    (home_dir / ".gitconfig").write_bytes(contents)
    pygit2.settings.search_path[pygit2.GIT_CONFIG_LEVEL_GLOBAL] = str(home_dir)
    pygit2.settings.search_path[pygit2.GIT_CONFIG_LEVEL_XDG] = str(xdg_dir / "git")
    pygit2.settings.search_path[pygit2.GIT_CONFIG_LEVEL_SYSTEM] = str(system_dir)


@pytest.fixture
def scm(tmp_dir: TmpDir) -> Iterator[Git]:
    git_ = Git.init(tmp_dir)
    sig = git_.pygit2.repo.default_signature

    assert sig.email == "scmtester@example.com"
    assert sig.name == "SCM Tester"

    yield git_
    git_.close()


backends = ["gitpython", "dulwich", "pygit2"]


@pytest.fixture(params=backends)
def git_backend(request) -> str:
    marker = request.node.get_closest_marker("skip_git_backend")
    to_skip = marker.args if marker else []

    backend = request.param
    if backend in to_skip:
        pytest.skip()
    return backend


@pytest.fixture
def git(tmp_dir: TmpDir, git_backend: str) -> Iterator[Git]:
    git_ = Git(tmp_dir, backends=[git_backend])
    yield git_
    git_.close()


@pytest.fixture
def append_config(tmp_dir: TmpDir) -> Callable[[str], None]:
    """Append raw text to the repository's local config file."""

    def _append(text: str) -> None:
        path = tmp_dir / ".git" / "config"
        with open(path, "a", encoding="utf-8") as fobj:
            fobj.write(text)

    return _append
