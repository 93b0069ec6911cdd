"""
MIME part model.

A part is a header block plus a body. Header values live in the optional
Content-* fields; the body is kept either raw (and transfer-encoded on output)
or, for parts rebuilt from a parsed message, already in its wire form.
"""

import base64
import quopri
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from ..config import settings
from .header_field import HeaderField

BASE64_LINE_LENGTH = 76


class Part(BaseModel):
    """Single MIME part: recognized header fields and content."""

    content: Union[str, bytes] = Field("", description="Part body")
    type: Optional[str] = Field(None, description="Content-Type value")
    encoding: Optional[str] = Field(
        None, description="Content-Transfer-Encoding (7bit, 8bit, base64, quoted-printable)"
    )
    id: Optional[str] = Field(None, description="Content-ID without angle brackets")
    disposition: Optional[str] = Field(None, description="Content-Disposition value")
    description: Optional[str] = Field(None, description="Content-Description value")
    location: Optional[str] = Field(None, description="Content-Location value")
    language: Optional[str] = Field(None, description="Content-Language value")
    encoded: bool = Field(
        False, description="Content is already transfer-encoded and is emitted unchanged"
    )

    model_config = {"validate_assignment": True}

    @field_validator("id")
    @classmethod
    def strip_angle_brackets(cls, value: Optional[str]) -> Optional[str]:
        """Drop one surrounding ``<`` ``>`` pair so ids are stored bare."""
        if value is not None and len(value) >= 2 and value[0] == "<" and value[-1] == ">":
            return value[1:-1]
        return value

    def get_headers_array(self) -> List[Tuple[str, str]]:
        """
        Header fields that are set, in canonical order.

        Returns:
            List of (display name, value) pairs; Content-ID is re-bracketed
        """
        headers = []
        for field in HeaderField:
            value = getattr(self, field.attribute)
            if value is None:
                continue
            if field is HeaderField.ID:
                value = f"<{value}>"
            headers.append((field.display_name, value))
        return headers

    def get_headers(self, eol: Optional[str] = None) -> str:
        """Render the header block, each field terminated by ``eol``."""
        eol = settings.line_ending if eol is None else eol
        return "".join(f"{name}: {value}{eol}" for name, value in self.get_headers_array())

    def get_content(self, eol: Optional[str] = None) -> str:
        """
        Return the body in its transfer-encoded form.

        Args:
            eol: Line ending used when the encoding wraps lines

        Returns:
            Encoded body text
        """
        eol = settings.line_ending if eol is None else eol
        if self.encoded:
            return _as_text(self.content)

        encoding = (self.encoding or "").lower()
        if encoding == "base64":
            encoded = base64.b64encode(_as_bytes(self.content)).decode("ascii")
            return eol.join(
                encoded[i:i + BASE64_LINE_LENGTH]
                for i in range(0, len(encoded), BASE64_LINE_LENGTH)
            )
        if encoding == "quoted-printable":
            encoded = quopri.encodestring(_as_bytes(self.content)).decode("ascii")
            return encoded.replace("\n", eol)
        return _as_text(self.content)


def _as_bytes(content: Union[str, bytes]) -> bytes:
    return content.encode("utf-8") if isinstance(content, str) else content


def _as_text(content: Union[str, bytes]) -> str:
    return content if isinstance(content, str) else content.decode("utf-8", errors="replace")
