"""git config convenience wrapper."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigEntry:
    """Single resolved config key.

    A key may exist in the store without carrying a value (e.g. a bare
    ``bare`` line under ``[core]``), in which case ``value`` is None.
    """

    name: str
    value: Optional[str] = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


def split_key(key: str) -> tuple[tuple[str, ...], str]:
    """Split a dotted config key into its section and name.

    ``remote.origin.url`` becomes ``(("remote", "origin"), "url")``. Anything
    between the first and the last dot is the subsection, which may itself
    contain dots.

    Raises:
        KeyError: key does not have both a section and a name.
    """
    section, _, rest = key.partition(".")
    subsection, _, name = rest.rpartition(".")
    if not section or not name:
        raise KeyError(key)
    if subsection:
        return (section, subsection), name
    return (section,), name


class Config(ABC):
    """Read-only Git config."""

    @abstractmethod
    def get_entry(self, key: str) -> ConfigEntry:
        """Look up the specified dotted key.

        Raises:
            KeyError: Option was not set or the key could not be looked up.
        """

    def get(self, key: str) -> str:
        """Return the specified setting as a string.

        Raises:
            KeyError: Option was not set or has no value.
        """
        entry = self.get_entry(key)
        if not entry.has_value:
            raise KeyError(key)
        assert entry.value is not None
        return entry.value
