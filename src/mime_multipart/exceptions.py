"""
Exceptions raised while decoding multipart MIME bodies.

Both error kinds abort the whole operation: callers never receive a partially
populated message.
"""


class MimeError(ValueError):
    """Base class for multipart decoding failures."""


class MalformedMessageError(MimeError):
    """Raised when interior boundaries are present but the closing boundary is not."""

    def __init__(self, boundary: str):
        self.boundary = boundary
        super().__init__(f"Not a valid MIME message: end boundary '--{boundary}--' missing")


class UnknownHeaderError(MimeError):
    """Raised when a part carries a header outside the recognized Content-* set."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Unknown header for MIME part: {field_name}")
