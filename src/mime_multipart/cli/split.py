"""
Command-line interface for splitting multipart MIME bodies.

Splits a multipart body into its parts and prints one JSON object per part.

Usage:
    # Print parts to stdout
    python -m mime_multipart.cli.split body.txt --boundary "=_abc123"

    # CRLF body, save to file
    python -m mime_multipart.cli.split body.txt -b "=_abc123" --line-ending crlf -o parts.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import charset_normalizer
import structlog

from mime_multipart.config import settings
from mime_multipart.logging_config import setup_logging
from mime_multipart.message import DecodeStatus, decode_message
from mime_multipart.models.part import Part

logger = structlog.get_logger(__name__)

LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}

EXIT_OK = 0
EXIT_DECODE_FAILED = 1
EXIT_BAD_INPUT = 2


def read_message_file(path: Path) -> str:
    """
    Read a multipart body from disk.

    Bytes are decoded as UTF-8 when possible, otherwise with the encoding
    detected by charset-normalizer.

    Args:
        path: File to read

    Returns:
        Body text

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file exceeds ``settings.max_message_size_mb``
    """
    raw = path.read_bytes()

    max_bytes = settings.max_message_size_mb * 1024 * 1024
    if len(raw) > max_bytes:
        raise ValueError(
            f"File too large: {len(raw)} bytes (max {settings.max_message_size_mb} MB)"
        )

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        detected = charset_normalizer.from_bytes(raw).best()
        if detected:
            logger.info("encoding_detected", path=str(path), encoding=detected.encoding)
            return str(detected)
        return raw.decode("utf-8", errors="replace")


def part_to_record(index: int, part: Part, eol: Optional[str] = None) -> Dict[str, Any]:
    """Flatten a part into a JSON-serializable dict."""
    record: Dict[str, Any] = {"index": index}
    record.update(part.model_dump(exclude={"content", "encoded"}, exclude_none=True))
    record["content"] = part.get_content(eol)
    return record


def write_output(records: List[Dict[str, Any]], output_path: Optional[Path]) -> None:
    """
    Write records as JSON lines.

    Args:
        records: Part records
        output_path: Output file path; stdout when None
    """
    if output_path is None:
        for record in records:
            print(json.dumps(record, ensure_ascii=False))
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    logger.info("output_written", path=str(output_path), count=len(records))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a multipart MIME body into its parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  parts decoded (or no boundary found)
  1  closing boundary missing or unsupported part header
  2  input file missing, unreadable or too large
        """,
    )
    parser.add_argument("input", type=str, help="Path to the multipart body")
    parser.add_argument(
        "--boundary", "-b", type=str, required=True, help="Boundary token, without leading dashes"
    )
    parser.add_argument(
        "--line-ending",
        "-l",
        choices=sorted(LINE_ENDINGS),
        default=None,
        help="Line ending the body was written with (default: from settings)",
    )
    parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output .jsonl path (default: stdout)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)

    input_path = Path(args.input)
    eol = LINE_ENDINGS[args.line_ending] if args.line_ending else settings.line_ending

    try:
        body = read_message_file(input_path)
    except (OSError, ValueError) as e:
        logger.error("input_unreadable", path=str(input_path), error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = decode_message(body, args.boundary, eol)
    if not result.ok:
        logger.error(
            "decode_failed",
            path=str(input_path),
            status=result.status.value,
            field_name=result.field_name,
        )
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_DECODE_FAILED

    if result.status is DecodeStatus.EMPTY:
        logger.warning("no_parts_found", path=str(input_path), boundary=args.boundary)

    records = [
        part_to_record(index, part, eol)
        for index, part in enumerate(result.message.get_parts())
    ]
    write_output(records, Path(args.output) if args.output else None)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
