"""
Versioned: a wrapper which counts mutable accesses to the value it holds.

Useful when caching results computed from objects that are expensive to
compare or hash, such as large collections or arrays. Instead of keeping
a copy of the object to compare against, store its version and check
later whether it changed.

Example
-------
>>> names = Versioned(["alpha", "beta"])
>>> names.version
0
>>> len(names.get())        # read access, not counted
2
>>> names.get_mut().append("gamma")
>>> names.version
1

Mutations are counted when mutable access is *granted*, not when a write
actually happens. Calling :meth:`Versioned.get_mut` and discarding the
result still increments the version.
"""

import copy
import logging
from contextlib import contextmanager
from typing import Callable, Generic, TypeVar

import numpy as np

from ._types import (
    INITIAL_VERSION,
    MAX_VERSION,
    Version,
    VersionOverflowError,
    check_version,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _owned(value):
    # read-only arrays (e.g. views handed out by get()) are copied
    if isinstance(value, np.ndarray) and not value.flags.writeable:
        return value.copy()

    return value


class Versioned(Generic[T]):
    """
    # Versioned

    Generic wrapper holding a value of any type together with a version
    counter. All access to the value goes through the wrapper so that
    mutable access can be counted.

    ## Access

    | Method | Counts | Returns |
    |--------|--------|---------|
    | `get()` / `as_ref()` | no | read-only view of the value |
    | `get_mut()` / `as_mut()` | +1 | the value itself |
    | `value` (get) | no | same as `get()` |
    | `value = x` (set) | +1 | replaces the value |
    | `with cell.mutate() as v:` | +1 on entry | the value itself |

    Python has no const references, so the read-only contract of `get()`
    is up to the caller, with one exception: numpy arrays are handed out
    as non-writeable views. In-place operators on an array payload must
    therefore go through `get_mut()` or `mutate()`; `cell.value += 1.0`
    raises `ValueError` and leaves the version unchanged.

    A non-writeable array given to the constructor or assigned through
    `value` (such as a view returned by `get()`) is copied, so the cell
    always owns a writeable array.

    ## Copying

    `clone()`, `copy.copy()` and `copy.deepcopy()` all produce a cell
    whose version is reset to `INITIAL_VERSION`. The version of the
    source is **not** carried over.

    ## Overflow

    The counter is bounded by `MAX_VERSION`. Requesting mutable access at
    that bound raises `VersionOverflowError` and leaves the counter
    unchanged.

    Parameters
    ----------
    value : T
        The value to wrap. The cell takes ownership of it.
    version : int, optional
        Starting version (default `INITIAL_VERSION`).
    """

    def __init__(self, value: T, version: Version = INITIAL_VERSION):
        self._value = _owned(value)
        self._version = check_version(version)

    @classmethod
    def with_version(cls, value: T, version: Version) -> "Versioned[T]":
        """Construct a wrapper with the given starting version."""
        return cls(value, version)

    @classmethod
    def default(cls, factory: Callable[[], T]) -> "Versioned[T]":
        """
        Construct a wrapper holding ``factory()`` at version ``INITIAL_VERSION``.

        Parameters
        ----------
        factory : callable
            Zero-argument callable producing the default value, e.g.
            ``list``, ``dict``, ``str`` or ``lambda: np.zeros(3)``.
        """
        return cls(factory())

    @classmethod
    def default_with_version(
        cls, factory: Callable[[], T], version: Version
    ) -> "Versioned[T]":
        """Construct a wrapper holding ``factory()`` with the given version."""
        return cls(factory(), version)

    @property
    def version(self) -> Version:
        """Current version. Reading it has no side effects."""
        return self._version

    def changed_since(self, version: Version) -> bool:
        """
        Check whether mutable access was granted since ``version`` was observed.

        Parameters
        ----------
        version : int
            A value previously read from :attr:`version` of this cell.
        """
        return self._version != version

    def get(self) -> T:
        """
        Return the value for reading. Does not increment the version.

        Numpy arrays are returned as non-writeable views.
        """
        if isinstance(self._value, np.ndarray):
            view = self._value.view()
            view.flags.writeable = False
            return view

        return self._value

    def get_mut(self) -> T:
        """
        Return the value for modification. Increments the version.

        The increment happens on this call, whether or not the returned
        value is subsequently modified.

        Raises
        ------
        VersionOverflowError
            If the version is already at ``MAX_VERSION``.
        """
        self._increment()
        return self._value

    as_ref = get
    as_mut = get_mut

    @property
    def value(self) -> T:
        """The wrapped value. Reading is uncounted; assignment counts once."""
        return self.get()

    @value.setter
    def value(self, new_value: T):
        self._increment()
        self._value = _owned(new_value)

    @contextmanager
    def mutate(self):
        """
        Context manager granting mutable access for the duration of a block.

        The version is incremented once on entry, even if the block writes
        nothing or raises.

        Example
        -------
        >>> with cell.mutate() as data:
        ...     data["key"] = 1
        ...     data["other"] = 2
        # version incremented once
        """
        yield self.get_mut()

    def clone(self) -> "Versioned[T]":
        """
        Return a new wrapper holding a deep copy of the value.

        The clone's version is ``INITIAL_VERSION``, not the version of
        this wrapper.
        """
        return copy.deepcopy(self)

    def __copy__(self):
        logger.debug(f"Shallow copy of versioned value resets version {self._version}")
        return type(self)(copy.copy(self._value))

    def __deepcopy__(self, memo):
        logger.debug(f"Deep copy of versioned value resets version {self._version}")
        result = type(self).__new__(type(self))
        memo[id(self)] = result
        result._value = _owned(copy.deepcopy(self._value, memo))
        result._version = INITIAL_VERSION
        return result

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r}, version={self._version})"

    def _increment(self):
        if self._version >= MAX_VERSION:
            logger.error(f"Version counter at maximum ({MAX_VERSION}), cannot increment")
            raise VersionOverflowError(
                f"version overflow: counter already at maximum value {MAX_VERSION}"
            )

        self._version += 1
