# Multipart MIME parsing module

from .disassembler import RawPartBlock, decode_parts, disassemble, split_mime
from .header_tokenizer import parse_header_fields, split_message
from .part_mapper import build_part

__all__ = [
    "RawPartBlock",
    "split_mime",
    "disassemble",
    "decode_parts",
    "split_message",
    "parse_header_fields",
    "build_part",
]
