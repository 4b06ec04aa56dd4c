"""Typed access to git repository configuration."""

from scmconfig.exceptions import MalformedValueError, SCMError, StoreAccessError
from scmconfig.git import Git
from scmconfig.git.settings import (
    PushDefaultStrategy,
    UntrackedFilesMode,
    get_config_string,
    push_default_strategy_config,
    untracked_files_config,
)

__all__ = [
    "Git",
    "MalformedValueError",
    "PushDefaultStrategy",
    "SCMError",
    "StoreAccessError",
    "UntrackedFilesMode",
    "get_config_string",
    "push_default_strategy_config",
    "untracked_files_config",
]
