class RandomizerError(Exception):
    """Base class for failures raised while generating random blocks."""


class OverflowUnderflowError(RandomizerError, IndexError):
    """Raised when the candidate-token pool cannot produce a token."""


class InvalidEncodingError(RandomizerError, ValueError):
    """Raised when assembled bytes are not valid UTF-8."""

    def __init__(self, cause: UnicodeDecodeError):
        self.cause = cause
        super().__init__(f"bytes are not valid UTF-8: {cause}")


class CharsetMismatchError(RandomizerError, ValueError):
    """Raised when a charset cannot satisfy the requested length policy."""
