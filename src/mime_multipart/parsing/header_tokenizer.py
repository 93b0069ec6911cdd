"""
Header block handling for raw MIME part blocks.

Splits a raw part into its header block and body, and tokenizes the header
block into (field name, field value) pairs with the standard library
``email`` parser.
"""

import re
from email.parser import HeaderParser
from email.policy import compat32
from typing import List, Optional, Tuple

import structlog

from ..config import settings
from ..exceptions import UnknownHeaderError

logger = structlog.get_logger(__name__)

# First line of a header block: a field name followed by a colon
HEADER_LINE_PATTERN = re.compile(r"^[^\s:][^:\r\n]*:")

# Any doubled line break, used when no known separator is found
BLANK_LINE_PATTERN = re.compile(r"(\r\n|\n|\r)\1")

# Line break followed by whitespace marks a folded header continuation
FOLDING_PATTERN = re.compile(r"\r?\n(?=[ \t])")


def split_message(block: str, eol: Optional[str] = None) -> Tuple[str, str]:
    """
    Split a raw part block into header block and body.

    The blank line separating the two is searched as ``eol`` twice first,
    then as CRLF CRLF, then LF LF, and finally as any doubled line break.

    Args:
        block: Raw text between two boundary delimiters
        eol: Line ending the message was generated with

    Returns:
        Tuple of (header_block, body); header_block is empty when the block
        does not start with a header line
    """
    eol = settings.line_ending if eol is None else eol

    for terminator in ("\r\n", "\n"):
        if block.startswith(terminator):
            return "", block[len(terminator):]

    first_line = block.split("\n", 1)[0]
    if not HEADER_LINE_PATTERN.match(first_line):
        return "", block

    for separator in (eol + eol, "\r\n\r\n", "\n\n"):
        if separator and separator in block:
            headers, body = block.split(separator, 1)
            return headers, body

    match = BLANK_LINE_PATTERN.search(block)
    if match is None:
        return block, ""
    return block[:match.start()], block[match.end():]


def parse_header_fields(header_block: str) -> List[Tuple[str, str]]:
    """
    Tokenize a header block into ordered (name, value) pairs.

    Folded values are unfolded; names keep the case they were written in.
    A line that is not a header field stops the parser, so anything left
    over after parsing is rejected rather than dropped.

    Args:
        header_block: Header lines of one part, without the blank separator line

    Returns:
        List of (field_name, field_value) tuples in input order

    Raises:
        UnknownHeaderError: If the block holds a line that is not a header
            field; the error names that line's field name, or the line itself
    """
    if not header_block.strip():
        return []

    message = HeaderParser(policy=compat32).parsestr(header_block, headersonly=True)
    leftover = message.get_payload() or ""
    if leftover.strip():
        offending = leftover.strip().splitlines()[0]
        field_name = offending.split(":", 1)[0].strip()
        logger.warning("unparsed_header_line", line=offending)
        raise UnknownHeaderError(field_name)

    return [
        (name, FOLDING_PATTERN.sub("", value).strip())
        for name, value in message.items()
    ]
