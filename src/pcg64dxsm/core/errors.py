"""
PCG64-DXSM Errors

Explicit error types. Every public operation either completes or raises one
of these before touching generator state.
"""


class PcgError(Exception):
    """Base error for the PCG64-DXSM engine."""

    pass


# =============================================================================
# Construction Errors
# =============================================================================


class SeedError(PcgError):
    """A generator could not be constructed from the given seed material."""

    pass


class EntropyUnavailableError(SeedError):
    """No secure entropy source could supply seed bytes."""

    pass


class SeedLengthError(SeedError, ValueError):
    """Raw seed bytes were neither 16 nor 32 bytes long."""

    pass


class SeedParseError(SeedError, ValueError):
    """A seed value could not be converted to an unsigned 128-bit integer."""

    pass


# =============================================================================
# Usage Errors
# =============================================================================


class UsageError(PcgError, ValueError):
    """An operation was called with arguments outside its domain."""

    pass


class BoundError(UsageError):
    """Bounded sampling was asked for a bound outside [1, 2^64]."""

    pass


class RangeError(UsageError):
    """A helper received an invalid or empty range."""

    pass


# =============================================================================
# State Import Errors
# =============================================================================


class StateImportError(PcgError, ValueError):
    """An exported state record could not be imported."""

    pass
