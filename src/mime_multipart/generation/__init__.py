# Multipart MIME generation module

from .generator import PREAMBLE, generate_message

__all__ = [
    "PREAMBLE",
    "generate_message",
]
