# formatkit/exceptions/base.py
"""Root of the formatkit exception hierarchy."""


class FormatKitError(Exception):
    """Base for all formatkit exceptions."""


# ----------------------------------------------------------------------------
# Format name errors
# ----------------------------------------------------------------------------
class FormatError(FormatKitError):
    """A format name could not be used for dispatch."""


class UnknownFormatError(FormatError, LookupError):
    """No registered codec matches the requested format name."""

    def __init__(self, format: str):
        super().__init__(f"Unknown format {format}!")
        self.format = format


class MissingFormatError(FormatError, ValueError):
    """An empty format name was supplied."""

    def __init__(self, message: str = "Missing format!"):
        super().__init__(message)
