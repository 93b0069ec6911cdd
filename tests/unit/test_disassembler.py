"""
Unit tests for boundary scanning (parsing/disassembler.py).

Tests cover:
- Preamble and epilogue handling
- Missing delimiter (empty result) versus missing closing delimiter (error)
- Near-boundary text inside bodies
- Header/body separation of each part
"""

import pytest

from mime_multipart.exceptions import MalformedMessageError, UnknownHeaderError
from mime_multipart.parsing.disassembler import (
    RawPartBlock,
    decode_parts,
    disassemble,
    split_mime,
)
from tests.fixtures.messages import BOUNDARY, SAMPLE_MESSAGES


class TestSplitMime:
    """Tests for split_mime() function."""

    @pytest.mark.unit
    def test_preamble_discarded(self):
        """Test text before the first delimiter is not returned."""
        body = "ignored preamble\n--B\none\n--B\ntwo\n--B--"
        assert split_mime(body, "B") == ["one", "two"]

    @pytest.mark.unit
    def test_epilogue_discarded(self):
        """Test text after the closing delimiter is not returned."""
        assert split_mime("--B\nonly\n--B--\nepilogue\n", "B") == ["only"]

    @pytest.mark.unit
    def test_single_part(self):
        """Test one delimiter followed by the closing delimiter."""
        assert split_mime("--B\nonly\n--B--", "B") == ["only"]

    @pytest.mark.unit
    def test_no_delimiter_returns_empty(self):
        """Test absence of any delimiter line is not an error."""
        assert split_mime(SAMPLE_MESSAGES["no_boundary"], BOUNDARY) == []
        assert split_mime("", BOUNDARY) == []

    @pytest.mark.unit
    def test_closing_delimiter_alone_returns_empty(self):
        """Test a closing delimiter without interior ones yields nothing."""
        assert split_mime("--B--\n", "B") == []

    @pytest.mark.unit
    def test_missing_end_raises(self):
        """Test interior delimiters without the closing one fail."""
        with pytest.raises(MalformedMessageError) as exc_info:
            split_mime(SAMPLE_MESSAGES["missing_end"], BOUNDARY)
        assert exc_info.value.boundary == BOUNDARY
        assert f"--{BOUNDARY}--" in str(exc_info.value)

    @pytest.mark.unit
    def test_crlf_delimiters(self):
        """Test delimiters terminated by CRLF and the CRLF before them."""
        body = "--B\r\none\r\nline\r\n--B\r\ntwo\r\n--B--\r\n"
        assert split_mime(body, "B", "\r\n") == ["one\r\nline", "two"]

    @pytest.mark.unit
    def test_only_eol_removed_before_delimiter(self):
        """Test a CR ending an LF message body is part of the body."""
        body = "--B\nfirst\r\n--B\nsecond\r\n--B--"
        assert split_mime(body, "B", "\n") == ["first\r", "second\r"]

    @pytest.mark.unit
    def test_lf_accepted_in_crlf_message(self):
        """Test a bare LF before a delimiter is still removed in a CRLF message."""
        assert split_mime("--B\r\nonly\n--B--", "B", "\r\n") == ["only"]

    @pytest.mark.unit
    def test_only_one_line_break_removed(self):
        """Test trailing blank lines of a body are kept except the delimiter's own."""
        assert split_mime("--B\nbody\n\n\n--B--", "B") == ["body\n\n"]

    @pytest.mark.unit
    def test_near_boundary_text_kept_in_body(self):
        """Test lines resembling delimiters do not split the part."""
        parts = split_mime(SAMPLE_MESSAGES["near_boundary"], BOUNDARY)
        assert len(parts) == 1
        assert parts[0].endswith(
            "--=_test012345678 is shorter\n"
            "--=_test0123456789 trailing text on the same line\n"
            "-=_test0123456789"
        )

    @pytest.mark.unit
    def test_boundary_with_regex_characters(self):
        """Test boundary tokens are matched literally."""
        body = "--a.b+c\none\n--a.b+c\ntwo\n--a.b+c--"
        assert split_mime(body, "a.b+c") == ["one", "two"]
        assert split_mime("--aXbYc\none\n--aXbYc--", "a.b+c") == []


class TestDisassemble:
    """Tests for disassemble() function."""

    @pytest.mark.unit
    def test_blocks_split_into_headers_and_body(self, two_parts_lf):
        """Test each part becomes a RawPartBlock."""
        blocks = disassemble(two_parts_lf, BOUNDARY, "\n")

        assert blocks == [
            RawPartBlock(
                headers="Content-Type: text/plain; charset=utf-8\nContent-Transfer-Encoding: 8bit",
                body="Ciao, questo è il testo.",
            ),
            RawPartBlock(
                headers="Content-Type: text/html\nContent-ID: <logo@example.com>",
                body="<p>Ciao</p>",
            ),
        ]

    @pytest.mark.unit
    def test_crlf_message(self, two_parts_crlf):
        """Test CRLF body with epilogue."""
        blocks = disassemble(two_parts_crlf, BOUNDARY, "\r\n")

        assert len(blocks) == 2
        assert blocks[0].body == "first line\r\nsecond line"
        assert blocks[1].body == "AAECAwQ="

    @pytest.mark.unit
    def test_empty_result(self):
        """Test no delimiter gives an empty list."""
        assert disassemble(SAMPLE_MESSAGES["no_boundary"], BOUNDARY) == []

    @pytest.mark.unit
    def test_blocks_are_immutable(self):
        """Test RawPartBlock is frozen."""
        block = RawPartBlock(headers="", body="x")
        with pytest.raises(AttributeError):
            block.body = "y"


class TestDecodeParts:
    """Tests for decode_parts() function."""

    @pytest.mark.unit
    def test_decode_parts(self, two_parts_crlf):
        """Test parts are rebuilt with their recognized fields."""
        parts = decode_parts(two_parts_crlf, BOUNDARY, "\r\n")

        assert [p.type for p in parts] == ["text/plain", "application/octet-stream"]
        assert parts[1].encoding == "base64"
        assert parts[1].disposition == 'attachment; filename="data.bin"'
        assert parts[1].get_content("\r\n") == "AAECAwQ="

    @pytest.mark.unit
    def test_folded_and_mixed_case_headers(self):
        """Test header names are matched case-insensitively after unfolding."""
        parts = decode_parts(SAMPLE_MESSAGES["folded_header"], BOUNDARY, "\n")

        assert parts[0].type == 'multipart/related;\ttype="text/html"'
        assert parts[0].language == "it"

    @pytest.mark.unit
    def test_unknown_header_raises(self):
        """Test an unsupported header aborts decoding."""
        with pytest.raises(UnknownHeaderError) as exc_info:
            decode_parts(SAMPLE_MESSAGES["custom_header"], BOUNDARY, "\n")
        assert exc_info.value.field_name == "X-Custom"

    @pytest.mark.unit
    def test_header_after_invalid_line_not_dropped(self):
        """Test headers following a non-header line abort decoding."""
        body = "--B\nContent-Type: text/plain\nbogus line\nX-Custom: 1\n\nbody\n--B--"
        with pytest.raises(UnknownHeaderError) as exc_info:
            decode_parts(body, "B", "\n")
        assert exc_info.value.field_name == "bogus line"
