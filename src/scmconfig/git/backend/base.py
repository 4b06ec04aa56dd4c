import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from scmconfig.exceptions import SCMError

if TYPE_CHECKING:
    from scmconfig.git.config import Config


class NoGitBackendError(SCMError):
    def __init__(self, func):
        super().__init__(f"No valid Git backend for '{func}'")


class BaseGitBackend(ABC):
    """Base Git backend class."""

    @abstractmethod
    def __init__(self, root_dir=os.curdir, search_parent_directories=True):
        pass

    def close(self):  # noqa: B027
        pass

    @property
    @abstractmethod
    def root_dir(self) -> str:
        pass

    @staticmethod
    @abstractmethod
    def init(path: str, bare: bool = False) -> None:
        pass

    @abstractmethod
    def get_config(self, path: Optional[str] = None) -> "Config":
        """Return a Git config object.

        Args:
            path: If set, a config object for the specified config file will be
                returned. By default, the standard Git system/global/repo config
                stack object will be returned.

        Raises:
            StoreAccessError: the config could not be opened or parsed.
        """
