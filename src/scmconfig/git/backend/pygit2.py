import logging
import os
from typing import TYPE_CHECKING, Optional

from scmconfig.exceptions import SCMError, StoreAccessError
from scmconfig.git.backend.base import BaseGitBackend
from scmconfig.git.config import Config, ConfigEntry

logger = logging.getLogger(__name__)


if TYPE_CHECKING:
    from pygit2.config import Config as _Pygit2Config


class Pygit2Config(Config):
    def __init__(self, config: "_Pygit2Config"):
        self._config = config

    def get_entry(self, key: str) -> ConfigEntry:
        from pygit2 import GitError
        from pygit2.ffi import ffi

        try:
            # NOTE: only the raw libgit2 entry tells a valueless key
            # (`[core] bare`) apart from an empty one. `_get_entry` and
            # `ConfigEntry.c_value` are private pygit2 API, recheck them on
            # pygit2 upgrades (test_config_valueless_entry covers this).
            entry = self._config._get_entry(key)  # pylint: disable=protected-access
        except (GitError, ValueError) as exc:
            raise KeyError(key) from exc

        if entry.c_value == ffi.NULL:
            return ConfigEntry(entry.name, None)
        return ConfigEntry(entry.name, entry.value)


class Pygit2Backend(BaseGitBackend):
    def __init__(  # pylint:disable=W0231
        self, root_dir=os.curdir, search_parent_directories=True
    ):
        import pygit2

        if search_parent_directories:
            ceiling_dirs = ""
        else:
            ceiling_dirs = os.path.abspath(root_dir)

        # NOTE: discover_repository will return path/.git/
        try:
            path = pygit2.discover_repository(  # pylint:disable=no-member
                os.fspath(root_dir), True, ceiling_dirs
            )
        except pygit2.GitError as exc:
            raise SCMError(f"{root_dir} is not a git repository") from exc
        if not path:
            raise SCMError(f"{root_dir} is not a git repository")

        try:
            self.repo = pygit2.Repository(path)
        except pygit2.GitError as exc:
            raise StoreAccessError(f"failed to open {path}") from exc

    def close(self):
        self.repo.free()

    @property
    def root_dir(self) -> Optional[str]:
        return self.repo.workdir

    @staticmethod
    def init(path: str, bare: bool = False) -> None:
        from pygit2 import init_repository

        init_repository(path, bare=bare)

    def get_config(self, path: Optional[str] = None) -> "Config":
        from pygit2 import GitError
        from pygit2.config import Config as _Pygit2Config

        try:
            if path:
                return Pygit2Config(_Pygit2Config(path))
            return Pygit2Config(self.repo.config)  # type: ignore[attr-defined]
        except (GitError, OSError) as exc:
            raise StoreAccessError("failed to open git config") from exc
