"""
Recognized MIME part header fields.

A part may only carry the Content-* fields listed here. Each member ties the
canonical lowercase header name to its display form and to the ``Part``
attribute that stores its value.
"""

from enum import Enum
from typing import Optional


class HeaderField(str, Enum):
    """Closed set of header fields understood on a MIME part."""

    TYPE = "content-type"
    ENCODING = "content-transfer-encoding"
    ID = "content-id"
    DISPOSITION = "content-disposition"
    DESCRIPTION = "content-description"
    LOCATION = "content-location"
    LANGUAGE = "content-language"

    @property
    def display_name(self) -> str:
        """Header name as written on the wire, e.g. ``Content-ID``."""
        return _DISPLAY_NAMES[self]

    @property
    def attribute(self) -> str:
        """Name of the ``Part`` field holding this header's value."""
        return self.name.lower()

    @classmethod
    def lookup(cls, name: str) -> Optional["HeaderField"]:
        """
        Resolve a header name case-insensitively.

        Args:
            name: Header field name as found in a header block

        Returns:
            Matching member, or None when the name is not recognized
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


_DISPLAY_NAMES = {
    HeaderField.TYPE: "Content-Type",
    HeaderField.ENCODING: "Content-Transfer-Encoding",
    HeaderField.ID: "Content-ID",
    HeaderField.DISPOSITION: "Content-Disposition",
    HeaderField.DESCRIPTION: "Content-Description",
    HeaderField.LOCATION: "Content-Location",
    HeaderField.LANGUAGE: "Content-Language",
}
