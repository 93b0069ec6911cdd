"""
Multipart MIME message container.

``MimeMessage`` owns an ordered list of parts and the boundary used to join
them. ``decode_message`` is the non-raising entry point for parsing: it
reports empty, malformed and unsupported input as distinct statuses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import structlog

from .boundary import Boundary
from .config import settings
from .exceptions import MalformedMessageError, UnknownHeaderError
from .generation.generator import generate_message
from .models.part import Part
from .parsing.disassembler import decode_parts

logger = structlog.get_logger(__name__)


class MimeMessage:
    """
    Ordered collection of MIME parts.

    Parts are neither deduplicated nor modified once added. The boundary
    provider is created on first use and kept for the life of the message.
    """

    def __init__(self, parts: Optional[List[Part]] = None, boundary: Optional[Boundary] = None):
        self._parts: List[Part] = list(parts) if parts else []
        self._boundary = boundary

    def get_parts(self) -> List[Part]:
        """Return the parts in message order."""
        return self._parts

    def set_parts(self, parts: List[Part]) -> None:
        """Replace all parts with a copy of ``parts``."""
        self._parts = list(parts)

    def add_part(self, part: Part) -> None:
        """Append a part; the same part may be added more than once."""
        self._parts.append(part)

    def is_multipart(self) -> bool:
        """True when the message has more than one part."""
        return len(self._parts) > 1

    def set_boundary_provider(self, boundary: Boundary) -> None:
        """Use a specific boundary, e.g. to reproduce a known message."""
        self._boundary = boundary

    def get_boundary_provider(self) -> Boundary:
        """Return the boundary provider, creating a random one on first call."""
        if self._boundary is None:
            self._boundary = Boundary()
        return self._boundary

    def generate_message(self, eol: Optional[str] = None) -> str:
        """
        Render the message body.

        Args:
            eol: Line ending; defaults to ``settings.line_ending``

        Returns:
            Empty string, the single part's content, or a multipart body
        """
        return generate_message(self._parts, self.get_boundary_provider(), eol)

    def get_part_headers_array(self, index: int) -> List[Tuple[str, str]]:
        """Header (name, value) pairs of the part at ``index``."""
        return self._part_at(index).get_headers_array()

    def get_part_headers(self, index: int, eol: Optional[str] = None) -> str:
        """Rendered header block of the part at ``index``."""
        return self._part_at(index).get_headers(eol)

    def get_part_content(self, index: int, eol: Optional[str] = None) -> str:
        """Encoded content of the part at ``index``."""
        return self._part_at(index).get_content(eol)

    def _part_at(self, index: int) -> Part:
        if not 0 <= index < len(self._parts):
            raise IndexError(f"Part index {index} out of range (message has {len(self._parts)} parts)")
        return self._parts[index]

    @classmethod
    def create_from_message(
        cls, message: str, boundary: str, eol: Optional[str] = None
    ) -> "MimeMessage":
        """
        Parse a multipart body into a new message.

        The boundary token given here is kept as the new message's boundary
        provider, so regenerating uses the same delimiters.

        Args:
            message: Multipart body text
            boundary: Boundary token separating the parts
            eol: Line ending the body was written with

        Returns:
            MimeMessage holding the parsed parts in order (empty when the
            body contains no delimiter line)

        Raises:
            MalformedMessageError: If the closing delimiter is missing
            UnknownHeaderError: If a part carries an unrecognized header
        """
        eol = settings.line_ending if eol is None else eol
        result = cls(boundary=Boundary(boundary))
        for part in decode_parts(message, boundary, eol):
            result.add_part(part)

        logger.debug("message_parsed", boundary=boundary, parts=len(result.get_parts()))
        return result

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"MimeMessage(parts={len(self._parts)}, boundary={self._boundary!r})"


class DecodeStatus(str, Enum):
    """Outcome of decoding a multipart body."""

    OK = "ok"
    EMPTY = "empty"
    MALFORMED = "malformed"
    UNKNOWN_HEADER = "unknown_header"


@dataclass
class DecodeResult:
    """
    Result of ``decode_message``.

    ``message`` is set for OK and EMPTY; ``error`` describes MALFORMED and
    UNKNOWN_HEADER, the latter also naming the offending ``field_name``.
    """

    status: DecodeStatus
    message: Optional[MimeMessage] = None
    error: Optional[str] = None
    field_name: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (DecodeStatus.OK, DecodeStatus.EMPTY)


def decode_message(message: str, boundary: str, eol: Optional[str] = None) -> DecodeResult:
    """
    Parse a multipart body without raising for bad input.

    Args:
        message: Multipart body text
        boundary: Boundary token
        eol: Line ending the body was written with

    Returns:
        DecodeResult with status EMPTY when no delimiter line exists, MALFORMED
        when the closing delimiter is missing, UNKNOWN_HEADER when a part
        header is unsupported, OK otherwise
    """
    try:
        parsed = MimeMessage.create_from_message(message, boundary, eol)
    except MalformedMessageError as e:
        return DecodeResult(status=DecodeStatus.MALFORMED, error=str(e))
    except UnknownHeaderError as e:
        return DecodeResult(
            status=DecodeStatus.UNKNOWN_HEADER, error=str(e), field_name=e.field_name
        )

    status = DecodeStatus.OK if len(parsed) else DecodeStatus.EMPTY
    return DecodeResult(status=status, message=parsed)
