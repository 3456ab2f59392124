"""Exceptions raised while reading or writing ADIF documents."""


class AdifError(Exception):
    """Base exception for ADIF conversion."""

    pass


class AdifStructureError(AdifError):
    """Raised when ADI text cannot be split into fields and records."""

    pass


class AdifWriteError(AdifError):
    """Raised when a record cannot be rendered as ADI text."""

    pass


class ConversionError(AdifError):
    """Raised when a structured document cannot be read."""

    pass
