"""
MIME multipart text codec.

Assembles ordered MIME parts into a single multipart body and splits such a
body back into its parts given the boundary token.
"""

from .boundary import Boundary, generate_boundary
from .exceptions import MalformedMessageError, MimeError, UnknownHeaderError
from .generation import generate_message
from .message import DecodeResult, DecodeStatus, MimeMessage, decode_message
from .models import HeaderField, Part
from .parsing import disassemble

__version__ = "1.0.0"

__all__ = [
    "Boundary",
    "generate_boundary",
    "MimeError",
    "MalformedMessageError",
    "UnknownHeaderError",
    "generate_message",
    "disassemble",
    "MimeMessage",
    "DecodeResult",
    "DecodeStatus",
    "decode_message",
    "HeaderField",
    "Part",
]
