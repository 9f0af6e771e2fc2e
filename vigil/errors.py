"""
Vigil Errors - Exception Hierarchy and Sentinels
================================================

Every error raised by Vigil derives from ``VigilError`` and from the built-in
exception a plain container would raise in the same situation, so code that
already catches ``IndexError`` or ``TypeError`` keeps working.
"""

# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _NotFound:
    """Sentinel for 'no such key' results from observable maps."""

    __slots__ = ()

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


# ============================================================================
# EXCEPTIONS
# ============================================================================


class VigilError(Exception):
    """Base class for all Vigil errors."""

    pass


class NullArgumentError(VigilError, TypeError):
    """A delegate container or observer was ``None``."""

    pass


class OutOfRangeError(VigilError, IndexError):
    """An index fell outside the valid range of the container."""

    pass


class SizeMismatchError(OutOfRangeError):
    """A source sequence does not fit in its destination."""

    pass


class UnsupportedOperationError(VigilError, TypeError):
    """A write was attempted on a read-only view."""

    pass


class InvalidIteratorStateError(VigilError, RuntimeError):
    """``remove()`` was called on an iterator that is not positioned."""

    pass


class StaleViewError(VigilError, RuntimeError):
    """A sub-list window was used after its parent changed structurally."""

    pass


def require_not_none(value, what: str = "argument"):
    """Return ``value`` unchanged, raising ``NullArgumentError`` if it is None."""
    if value is None:
        raise NullArgumentError(f"{what} must not be None")
    return value
