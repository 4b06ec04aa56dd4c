import logging
import os
from typing import TYPE_CHECKING, Optional

from scmconfig.exceptions import SCMError, StoreAccessError
from scmconfig.git.backend.base import BaseGitBackend

if TYPE_CHECKING:
    from scmconfig.git.config import Config


logger = logging.getLogger(__name__)


class DulwichBackend(BaseGitBackend):
    """Dulwich Git backend."""

    def __init__(  # pylint:disable=W0231
        self, root_dir=os.curdir, search_parent_directories=True
    ):
        from dulwich.errors import NotGitRepository
        from dulwich.repo import Repo

        try:
            if search_parent_directories:
                self.repo = Repo.discover(start=root_dir)
            else:
                self.repo = Repo(root_dir)
        except NotGitRepository as exc:
            raise SCMError(f"{root_dir} is not a git repository") from exc
        except ValueError as exc:
            raise StoreAccessError(f"failed to open {root_dir}") from exc

    def close(self):
        self.repo.close()

    @property
    def root_dir(self) -> str:
        return self.repo.path

    @staticmethod
    def init(path: str, bare: bool = False) -> None:
        from dulwich.porcelain import init

        init(path, bare=bare)

    def get_config(self, path: Optional[str] = None) -> "Config":
        # NOTE: dulwich parses valueless keys (`[push] default`) as "true",
        # so it cannot tell them apart from keys which are set.
        raise NotImplementedError
