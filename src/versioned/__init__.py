r"""
Versioned values: wrappers which count mutable accesses.

A :class:`Versioned` holds a value and an integer version. Read access
leaves the version alone; each grant of mutable access increments it by
one. Comparing versions is a cheap way to tell whether a large object may
have changed since it was last looked at.

Classes
-------
Versioned
    Generic wrapper with a version counter.
VersionOverflowError
    Raised when a version would exceed ``MAX_VERSION``.

Constants
---------
INITIAL_VERSION
    Version of newly constructed wrappers (0).
MAX_VERSION
    Largest representable version (unsigned 64-bit maximum).
"""
from ._version import __version__
from ._types import INITIAL_VERSION, MAX_VERSION, Version, VersionOverflowError
from .versioned import Versioned

__all__ = [
    "Versioned",
    "Version",
    "VersionOverflowError",
    "INITIAL_VERSION",
    "MAX_VERSION",
]
