from typing import Callable

import pytest
from pytest_test_utils import TmpDir

from scmconfig.exceptions import SCMError, StoreAccessError
from scmconfig.git import Git
from scmconfig.git.config import ConfigEntry, split_key


@pytest.mark.parametrize(
    "key, expected",
    [
        ("user.name", (("user",), "name")),
        ("remote.origin.url", (("remote", "origin"), "url")),
        (
            "url.https://example.com/.insteadOf",
            (("url", "https://example.com/"), "insteadOf"),
        ),
    ],
)
def test_split_key(key: str, expected):
    assert split_key(key) == expected


@pytest.mark.parametrize("key", ["", "user", "user.", ".name"])
def test_split_key_invalid(key: str):
    with pytest.raises(KeyError):
        split_key(key)


def test_config_entry():
    assert ConfigEntry("core.bare", "false").has_value
    assert ConfigEntry("core.bare", "").has_value
    assert not ConfigEntry("core.bare").has_value


def test_config(
    tmp_dir: TmpDir,
    scm: Git,
    git: Git,
    append_config: Callable[[str], None],
):
    append_config("[test]\n\tfoo = bar\n[remote \"origin\"]\n\turl = /tmp/remote\n")
    tmp_dir.gen(".otherconfig", "[test]\nfoo = baz\n")

    config = git.get_config()
    assert config.get_entry("test.foo") == ConfigEntry("test.foo", "bar")
    assert config.get("test.foo") == "bar"
    assert config.get("remote.origin.url") == "/tmp/remote"
    assert config.get("user.name") == "SCM Tester"

    config = git.get_config(".otherconfig")
    assert config.get("test.foo") == "baz"


def test_config_missing_key(tmp_dir: TmpDir, scm: Git, git: Git):
    config = git.get_config()
    with pytest.raises(KeyError):
        config.get_entry("this.doesnt.exist")
    with pytest.raises(KeyError):
        config.get_entry("nodot")


def test_config_case_insensitive_name(
    tmp_dir: TmpDir,
    scm: Git,
    git: Git,
    append_config: Callable[[str], None],
):
    append_config("[status]\n\tshowUntrackedFiles = no\n")

    config = git.get_config()
    assert config.get("status.showUntrackedFiles") == "no"
    assert config.get("status.showuntrackedfiles") == "no"


@pytest.mark.skip_git_backend("gitpython")
def test_config_valueless_entry(
    tmp_dir: TmpDir,
    scm: Git,
    git: Git,
    append_config: Callable[[str], None],
):
    append_config("[test]\n\tflag\n")

    entry = git.get_config().get_entry("test.flag")
    assert not entry.has_value
    with pytest.raises(KeyError):
        git.get_config().get("test.flag")


def test_config_valueless_entry_gitpython(
    tmp_dir: TmpDir, scm: Git, append_config: Callable[[str], None]
):
    append_config("[test]\n\tflag\n")

    with Git(tmp_dir, backends=["gitpython"]) as git:
        with pytest.raises(KeyError):
            git.get_config().get_entry("test.flag")


def test_corrupt_config(tmp_dir: TmpDir, scm: Git, git_backend: str):
    scm.close()
    tmp_dir.gen({".git": {"config": "[core\n\tbare = false\n"}})

    # NOTE: depending on the backend this fails either on open or on read
    with pytest.raises(SCMError):
        with Git(tmp_dir, backends=[git_backend]) as git:
            git.get_config()


def test_corrupt_config_file(tmp_dir: TmpDir, scm: Git, git_backend: str):
    tmp_dir.gen(".otherconfig", "[test\nfoo = baz\n")

    with Git(tmp_dir, backends=[git_backend]) as git:
        with pytest.raises(StoreAccessError):
            git.get_config(".otherconfig")
