"""
Multipart MIME body generation.
"""

from typing import Optional, Sequence

import structlog

from ..boundary import Boundary
from ..config import settings
from ..models.part import Part

logger = structlog.get_logger(__name__)

PREAMBLE = (
    "This is a message in Mime Format.  If you see this, "
    "your mail reader does not support this format."
)


def generate_message(
    parts: Sequence[Part], boundary: Boundary, eol: Optional[str] = None
) -> str:
    """
    Join parts into one MIME body.

    No parts give an empty string and a single part gives just its encoded
    content, without headers or delimiters. Two or more parts are written as
    preamble, one delimited header block and body per part, and the closing
    delimiter. The result is stripped of surrounding whitespace.

    Args:
        parts: Parts in output order
        boundary: Boundary provider for delimiter lines
        eol: Line ending; defaults to ``settings.line_ending``

    Returns:
        Generated body text
    """
    eol = settings.line_ending if eol is None else eol

    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0].get_content(eol).strip()

    boundary_line = boundary.boundary_line(eol)
    chunks = [PREAMBLE, eol]
    for part in parts:
        chunks.append(boundary_line)
        chunks.append(part.get_headers(eol))
        chunks.append(eol)
        chunks.append(part.get_content(eol))
    chunks.append(boundary.mime_end(eol))

    logger.debug("message_generated", parts=len(parts), boundary=boundary.boundary())
    return "".join(chunks).strip()
