"""
CLI module for the MIME multipart codec.

Provides command-line tools for splitting multipart bodies.
"""

from mime_multipart.cli.split import main as split_main

__all__ = ["split_main"]
