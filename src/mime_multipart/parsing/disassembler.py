"""
Boundary scanning for multipart MIME bodies.

Grammar handled here:

    preamble
    --boundary<EOL>  part  (repeated)
    --boundary--     epilogue

The preamble and anything after the closing delimiter are discarded. The
line break directly before a delimiter belongs to the delimiter, not to the
preceding part, so bodies come back exactly as they were written.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

import structlog

from ..config import settings
from ..exceptions import MalformedMessageError
from ..models.part import Part
from .header_tokenizer import parse_header_fields, split_message
from .part_mapper import build_part

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RawPartBlock:
    """Header block and body of one part, both still raw text."""

    headers: str
    body: str


def split_mime(body: str, boundary: str, eol: Optional[str] = None) -> List[str]:
    """
    Cut a multipart body into the raw text of each part.

    Args:
        body: Complete multipart body
        boundary: Boundary token, without the leading dashes
        eol: Line ending the body was written with; it is the line break
            removed before each delimiter

    Returns:
        Raw part texts in message order; empty if no delimiter line is found

    Raises:
        MalformedMessageError: If delimiters are present but the closing
            ``--boundary--`` is not
    """
    eol = settings.line_ending if eol is None else eol
    delimiter = re.compile(re.escape(f"--{boundary}") + r"\r?\n")
    close_delimiter = f"--{boundary}--"

    match = delimiter.search(body)
    if match is None:
        logger.debug("no_boundary_found", boundary=boundary)
        return []

    parts = []
    start = match.end()
    for match in delimiter.finditer(body, start):
        parts.append(_strip_line_break(body[start:match.start()], eol))
        start = match.end()

    end = body.find(close_delimiter, start)
    if end == -1:
        logger.warning("end_boundary_missing", boundary=boundary, parts_found=len(parts))
        raise MalformedMessageError(boundary)

    parts.append(_strip_line_break(body[start:end], eol))
    return parts


def disassemble(body: str, boundary: str, eol: Optional[str] = None) -> List[RawPartBlock]:
    """
    Split a multipart body into (header block, body) pairs.

    Args:
        body: Complete multipart body
        boundary: Boundary token
        eol: Line ending used to find each part's header/body separator

    Returns:
        List of RawPartBlock in message order

    Raises:
        MalformedMessageError: If the closing delimiter is missing
    """
    blocks = [RawPartBlock(*split_message(text, eol)) for text in split_mime(body, boundary, eol)]
    logger.debug("message_disassembled", boundary=boundary, parts=len(blocks))
    return blocks


def decode_parts(body: str, boundary: str, eol: Optional[str] = None) -> List[Part]:
    """
    Decode a multipart body into Part objects.

    Raises:
        MalformedMessageError: If the closing delimiter is missing
        UnknownHeaderError: If a part carries an unrecognized header
    """
    return [
        build_part(parse_header_fields(block.headers), block.body)
        for block in disassemble(body, boundary, eol)
    ]


def _strip_line_break(text: str, eol: str) -> str:
    # line break owned by the following delimiter
    if eol and text.endswith(eol):
        return text[:-len(eol)]
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
