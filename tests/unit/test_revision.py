"""
Unit tests for revision id generation.
"""

import re

import pytest

from docservice_client.core.revision import (
    MAX_REVISION_ID_LENGTH,
    generate_revision_id,
    string_hash,
    utf16_length,
)

ALLOWED = re.compile(r"[0-9A-Za-z_.=\-]*")


class TestStringHash:
    def test_known_values(self):
        assert string_hash("") == 0
        assert string_hash("hello") == 99162322

    def test_colliding_strings(self):
        assert string_hash("Aa") == string_hash("BB") == 2112

    def test_wraps_to_signed_32_bit(self):
        assert string_hash("polygenelubricants") == -2147483648

    def test_is_stable(self):
        value = "https://example.com/files/quarterly report.docx"
        assert string_hash(value) == string_hash(value)


class TestGenerateRevisionId:
    def test_short_key_is_kept(self):
        assert generate_revision_id("doc-1.v2_a=b") == "doc-1.v2_a=b"

    def test_disallowed_characters_are_replaced(self):
        assert generate_revision_id("a b/c?d:e") == "a_b_c_d_e"

    def test_long_key_is_hashed(self):
        key = "https://example.com/files/report.docx"
        assert generate_revision_id(key) == str(string_hash(key))

    def test_key_at_limit_is_not_hashed(self):
        key = "x" * MAX_REVISION_ID_LENGTH
        assert generate_revision_id(key) == key

    def test_non_bmp_characters_count_twice_towards_limit(self):
        key = "\U0001f4c4" * 15

        assert utf16_length(key) == 30
        assert generate_revision_id(key) == str(string_hash(key)) == "-956448119"

    def test_short_non_bmp_key_is_sanitized(self):
        assert generate_revision_id("\U0001f4c4" * 10) == "_" * 10

    def test_empty_key(self):
        assert generate_revision_id("") == ""

    @pytest.mark.parametrize(
        "key",
        [
            "",
            "simple",
            "with spaces and / slashes",
            "ünïcödé-ключ",
            "https://example.com/a/very/long/path/to/document.docx?version=17",
            "\U0001f4c4 emoji document",
            "x" * 500,
        ],
    )
    def test_output_is_bounded_and_safe(self, key):
        result = generate_revision_id(key)

        assert len(result) <= MAX_REVISION_ID_LENGTH
        assert ALLOWED.fullmatch(result)
