import logging
import os
from typing import TYPE_CHECKING, Optional

from scmconfig.exceptions import SCMError, StoreAccessError
from scmconfig.git.backend.base import BaseGitBackend
from scmconfig.git.config import Config, ConfigEntry, split_key

if TYPE_CHECKING:
    from git.config import GitConfigParser


logger = logging.getLogger(__name__)


class GitPythonConfig(Config):
    def __init__(self, config: "GitConfigParser"):
        self._config = config

    @staticmethod
    def _section(section: tuple[str, ...]) -> str:
        if len(section) > 1:
            return f'{section[0]} "{section[1]}"'
        return section[0]

    def get_entry(self, key: str) -> ConfigEntry:
        import configparser

        section, name = split_key(key)
        try:
            value = self._config.get(self._section(section), name)
        except configparser.Error as exc:
            raise KeyError(key) from exc
        return ConfigEntry(key, value)


class GitPythonBackend(BaseGitBackend):
    """git-python Git backend."""

    def __init__(  # pylint:disable=W0231
        self, root_dir=os.curdir, search_parent_directories=True
    ):
        import git
        from git.exc import InvalidGitRepositoryError, NoSuchPathError

        try:
            self.repo = git.Repo(
                root_dir, search_parent_directories=search_parent_directories
            )
        except (InvalidGitRepositoryError, NoSuchPathError) as exc:
            raise SCMError(f"{root_dir} is not a git repository") from exc

    def close(self):
        self.repo.close()

    @property
    def root_dir(self) -> str:
        return self.repo.working_tree_dir

    @staticmethod
    def init(path: str, bare: bool = False) -> None:
        from funcy import retry
        from git import Repo
        from git.exc import GitCommandNotFound

        # NOTE: handles EAGAIN error on BSD systems (osx in our case).
        # Otherwise when running tests you might get this exception:
        #
        #    GitCommandNotFound: Cmd('git') not found due to:
        #        OSError('[Errno 35] Resource temporarily unavailable')
        method = retry(5, GitCommandNotFound)(Repo.init)
        git = method(path, bare=bare)
        git.close()

    def get_config(self, path: Optional[str] = None) -> "Config":
        import configparser

        from git.config import GitConfigParser

        if path:
            config = GitConfigParser(path, read_only=True)
        else:
            config = self.repo.config_reader()
        try:
            # NOTE: readers are lazy, parse now so that a broken store fails
            # here rather than looking like a missing key later on.
            config.read()
        except (configparser.Error, OSError) as exc:
            raise StoreAccessError("failed to open git config") from exc
        return GitPythonConfig(config)
