"""
Version counter types and limits.

This module defines the integer type used for version numbers, the
version newly constructed wrappers start from, and the upper bound of
the counter.

The counter is modelled on an unsigned 64-bit integer. Python integers
never overflow on their own, so the bound is enforced explicitly and
exceeding it raises :class:`VersionOverflowError` rather than wrapping.
"""
import numpy as _np

Version = int

# Starting version, unless a seed version is given explicitly.
INITIAL_VERSION: Version = 0

MAX_VERSION: Version = int(_np.iinfo(_np.uint64).max)


class VersionOverflowError(OverflowError):
    """Raised when a version counter is incremented past MAX_VERSION"""

    pass


def check_version(version) -> Version:
    """
    Validate a seed version and return it as a plain ``int``.

    Parameters
    ----------
    version : int or numpy integer
        Candidate version. ``bool`` is rejected even though it is an
        ``int`` subclass.

    Raises
    ------
    TypeError
        If ``version`` is not an integer.
    ValueError
        If ``version`` lies outside ``[0, MAX_VERSION]``.
    """
    if isinstance(version, bool) or not isinstance(version, (int, _np.integer)):
        raise TypeError(f"version must be an integer, got {type(version).__name__}")

    version = int(version)
    if version < INITIAL_VERSION or version > MAX_VERSION:
        raise ValueError(
            f"version {version} out of range [{INITIAL_VERSION}, {MAX_VERSION}]"
        )

    return version
