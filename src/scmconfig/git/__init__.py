"""Manages Git."""

import logging
from collections import OrderedDict
from collections.abc import Iterable, Mapping
from functools import partial
from typing import Dict, Optional, Type

from funcy import first

from scmconfig.base import Base

from .backend.base import BaseGitBackend, NoGitBackendError
from .backend.dulwich import DulwichBackend
from .backend.gitpython import GitPythonBackend
from .backend.pygit2 import Pygit2Backend

logger = logging.getLogger(__name__)

BackendCls = Type[BaseGitBackend]


_LOW_PRIO_BACKENDS = ("gitpython",)


class from_backend:
    def __init__(self, *prio) -> None:
        self.prio = prio
        self.name = None

    def __set_name__(self, _, name):
        self.name = name

    def __get__(self, obj, cls):
        assert self.name
        if obj is None:
            return partial(cls._backend_func_cls, self.name, self.prio)
        return partial(obj._backend_func, self.name, self.prio)


class GitBackends(Mapping):
    DEFAULT: Dict[str, BackendCls] = {
        "pygit2": Pygit2Backend,
        "dulwich": DulwichBackend,
        "gitpython": GitPythonBackend,
    }

    def __getitem__(self, key: str) -> BaseGitBackend:
        """Lazily initialize backends and cache it afterwards"""
        initialized = self.initialized.get(key)
        if not initialized:
            # NOTE: backends named explicitly by `from_backend` are available
            # even when they were not selected.
            backend = self.backends.get(key) or self.DEFAULT[key]
            initialized = backend(*self.args, **self.kwargs)
            self.initialized[key] = initialized
        return initialized

    def __init__(self, selected: Optional[Iterable[str]], *args, **kwargs) -> None:
        selected = selected or list(self.DEFAULT)
        self.backends = OrderedDict((key, self.DEFAULT[key]) for key in selected)

        self.initialized: Dict[str, BaseGitBackend] = {}

        self.args = args
        self.kwargs = kwargs

    def __iter__(self):
        return iter(self.backends)

    def __len__(self) -> int:
        return len(self.backends)

    def close_initialized(self) -> None:
        for backend in self.initialized.values():
            backend.close()

    def move_to_end(self, key: str, last: bool = True):
        if key in self.backends and key not in _LOW_PRIO_BACKENDS:
            self.backends.move_to_end(key, last=last)


class Git(Base):
    """Class for managing Git."""

    default_backends = GitBackends.DEFAULT

    def __init__(self, *args, backends: Optional[Iterable[str]] = None, **kwargs):
        self.backends = GitBackends(backends, *args, **kwargs)
        first_ = first(self.backends.values())
        super().__init__(first_.root_dir)
        self._last_backend: Optional[str] = None

    @property
    def gitpython(self):
        return self.backends["gitpython"]

    @property
    def dulwich(self):
        return self.backends["dulwich"]

    @property
    def pygit2(self):
        return self.backends["pygit2"]

    def close(self):
        self.backends.close_initialized()

    # Prefer re-using the most recently used backend when possible. When
    # changing backends (due to unimplemented calls), we close the previous
    # backend to release any open git files/contexts that may cause conflicts
    # with the new backend.
    def _backend_func(self, name, prio, *args, **kwargs):
        backends = prio or self.backends.keys()
        for key in backends:
            if self._last_backend is not None and key != self._last_backend:
                self.backends[self._last_backend].close()
                self._last_backend = None
            try:
                backend = self.backends[key]
                func = getattr(backend, name)
                result = func(*args, **kwargs)
                self._last_backend = key
                self.backends.move_to_end(key, last=False)
                return result
            except NotImplementedError:
                logger.debug("'%s' is not implemented by '%s'", name, key)
        raise NoGitBackendError(name)

    @classmethod
    def _backend_func_cls(cls, name, prio, *args, **kwargs):
        backends = prio or cls.default_backends.keys()
        for key in backends:
            try:
                backend = cls.default_backends[key]
                func = getattr(backend, name)
                return func(*args, **kwargs)
            except NotImplementedError:
                logger.debug("'%s' is not implemented by '%s'", name, key)
        raise NoGitBackendError(name)

    @classmethod
    def init(
        cls, path: str, bare: bool = False, _backend: Optional[str] = None
    ) -> "Git":
        backends = (_backend,) if _backend else ()
        cls._backend_func_cls("init", backends, path, bare=bare)
        return cls(path)

    # NOTE: dulwich reads valueless keys as "true", only libgit2 and GitPython
    # keep them apart from keys which carry a value.
    get_config = from_backend("pygit2", "gitpython")
