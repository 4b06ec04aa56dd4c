"""Manages source control systems (e.g. Git)."""

from contextlib import AbstractContextManager


class Base(AbstractContextManager):
    """Base class for source control management driver implementations."""

    def __init__(self, root_dir=None):
        import os

        self._root_dir = os.path.realpath(root_dir or os.curdir)

    @property
    def root_dir(self) -> str:
        return self._root_dir

    def __repr__(self):
        return f"{type(self).__name__}: '{self.root_dir}'"

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Method to close the files"""
