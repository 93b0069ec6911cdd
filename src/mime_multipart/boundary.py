"""
Boundary token generation and boundary line formatting.
"""

import secrets
from typing import Optional

from .config import settings


class Boundary:
    """
    Boundary provider for one multipart message.

    The token is fixed at construction: pass one explicitly to reproduce a
    known message, or let a random one be generated.
    """

    def __init__(self, boundary: Optional[str] = None):
        self._boundary = boundary if boundary is not None else generate_boundary()

    def boundary(self) -> str:
        """Return the boundary token."""
        return self._boundary

    def boundary_line(self, eol: Optional[str] = None) -> str:
        """Separator line written before every part."""
        eol = settings.line_ending if eol is None else eol
        return f"{eol}--{self._boundary}{eol}"

    def mime_end(self, eol: Optional[str] = None) -> str:
        """Closing delimiter written after the last part."""
        eol = settings.line_ending if eol is None else eol
        return f"{eol}--{self._boundary}--{eol}"

    def __repr__(self) -> str:
        return f"Boundary({self._boundary!r})"


def generate_boundary(prefix: Optional[str] = None) -> str:
    """
    Create a random boundary token.

    Args:
        prefix: Token prefix; defaults to ``settings.boundary_prefix``

    Returns:
        Prefix followed by 32 random hex characters
    """
    prefix = settings.boundary_prefix if prefix is None else prefix
    return f"{prefix}{secrets.token_hex(16)}"
