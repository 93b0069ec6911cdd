"""
Rebuild ``Part`` objects from tokenized header fields.
"""

from typing import Iterable, Tuple

import structlog

from ..exceptions import UnknownHeaderError
from ..models.header_field import HeaderField
from ..models.part import Part

logger = structlog.get_logger(__name__)


def build_part(header_fields: Iterable[Tuple[str, str]], body: str) -> Part:
    """
    Create a Part from header (name, value) pairs and its encoded body.

    Header names are matched case-insensitively against ``HeaderField``.
    Content-ID loses its surrounding angle brackets. Fields absent from the
    input stay unset. The body is kept as-is, already transfer-encoded.

    Args:
        header_fields: Ordered (field_name, field_value) pairs of one part
        body: Part body as found on the wire

    Returns:
        Populated Part

    Raises:
        UnknownHeaderError: If any header is outside the recognized set
    """
    values = {}
    for name, value in header_fields:
        field = HeaderField.lookup(name)
        if field is None:
            logger.warning("unknown_part_header", field_name=name)
            raise UnknownHeaderError(name)
        values[field.attribute] = value

    return Part(content=body, encoded=True, **values)
