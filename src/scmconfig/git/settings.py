"""Typed git config settings.

Both resolvers re-read the config store on every call, so external edits to
the config are always picked up.
"""

import logging
import os
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Union

from funcy import log_durations

from scmconfig.exceptions import MalformedValueError, SCMError, StoreAccessError
from scmconfig.git import Git

logger = logging.getLogger(__name__)

RepoLike = Union[str, "os.PathLike[str]", Git]

SHOW_UNTRACKED_FILES = "status.showUntrackedFiles"
PUSH_DEFAULT = "push.default"


# see https://git-scm.com/docs/git-config#Documentation/git-config.txt-statusshowUntrackedFiles
class UntrackedFilesMode(Enum):
    """`status.showUntrackedFiles` state."""

    NONE = "no"
    NORMAL = "normal"
    ALL = "all"

    @property
    def includes_none(self) -> bool:
        return self is UntrackedFilesMode.NONE

    @property
    def includes_untracked(self) -> bool:
        return self in (UntrackedFilesMode.NORMAL, UntrackedFilesMode.ALL)

    @property
    def recurses_into_untracked_dirs(self) -> bool:
        return self is UntrackedFilesMode.ALL


# see https://git-scm.com/docs/git-config#Documentation/git-config.txt-pushdefault
class PushDefaultStrategy(Enum):
    """`push.default` state."""

    NOTHING = "nothing"
    CURRENT = "current"
    UPSTREAM = "upstream"
    SIMPLE = "simple"
    MATCHING = "matching"

    @classmethod
    def default(cls) -> "PushDefaultStrategy":
        return cls.SIMPLE

    @classmethod
    def parse(cls, value: str) -> "PushDefaultStrategy":
        """Parse a `push.default` token.

        Matching is exact, `tracking` is the deprecated name of `upstream`.

        Raises:
            MalformedValueError: value is not a known token.
        """
        try:
            return _PUSH_DEFAULT_TOKENS[value]
        except KeyError as exc:
            raise MalformedValueError(
                PUSH_DEFAULT, value, list(_PUSH_DEFAULT_TOKENS)
            ) from exc


_PUSH_DEFAULT_TOKENS = {
    "nothing": PushDefaultStrategy.NOTHING,
    "current": PushDefaultStrategy.CURRENT,
    "upstream": PushDefaultStrategy.UPSTREAM,
    "tracking": PushDefaultStrategy.UPSTREAM,
    "simple": PushDefaultStrategy.SIMPLE,
    "matching": PushDefaultStrategy.MATCHING,
}


@contextmanager
def _open_repo(repo: RepoLike) -> Iterator[Git]:
    if isinstance(repo, Git):
        yield repo
        return

    try:
        scm = Git(repo)
    except StoreAccessError:
        raise
    except SCMError as exc:
        raise StoreAccessError(f"{repo} is not a git repository") from exc
    with scm:
        yield scm


def get_config_string(repo: RepoLike, key: str) -> Optional[str]:
    """Return the value of a config key or None if it is not set.

    Keys which exist without a value are reported as not set.

    Raises:
        StoreAccessError: the repository or its config could not be opened.
    """
    with _open_repo(repo) as scm:
        with log_durations(logger.debug, f"get_config_string({key!r})"):
            config = scm.get_config()
            try:
                entry = config.get_entry(key)
            except KeyError:
                # NOTE: lookup errors are indistinguishable from keys which
                # were never set.
                logger.debug("'%s' is not set", key)
                return None

    if entry.has_value:
        return entry.value
    return None


def untracked_files_config(repo: RepoLike) -> UntrackedFilesMode:
    value = get_config_string(repo, SHOW_UNTRACKED_FILES)

    if value == "no":
        return UntrackedFilesMode.NONE
    if value == "normal":
        return UntrackedFilesMode.NORMAL

    # NOTE: git itself defaults to `normal`, but the callers' status backend
    # already limits untracked files that way on its own. Anything else,
    # unset or unknown, is `all`.
    return UntrackedFilesMode.ALL


def push_default_strategy_config(repo: RepoLike) -> PushDefaultStrategy:
    value = get_config_string(repo, PUSH_DEFAULT)
    if value is None:
        return PushDefaultStrategy.default()
    return PushDefaultStrategy.parse(value)
