"""Tests for blank checks and hashing."""
import hashlib

from payment_params.text_utils import is_blank, null_if_blank, sha_hash_input


class TestBlank:
    def test_none_is_blank(self):
        assert is_blank(None)

    def test_whitespace_is_blank(self):
        assert is_blank("  \t\n")

    def test_text_is_not_blank(self):
        assert not is_blank(" x ")

    def test_null_if_blank_keeps_original_value(self):
        assert null_if_blank(" x ") == " x "
        assert null_if_blank("   ") is None


class TestShaHash:
    def test_known_digest(self):
        assert sha_hash_input("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_lowercase_hex(self):
        digest = sha_hash_input("abc123")
        assert digest == digest.lower()
        assert len(digest) == 64

    def test_utf8_encoding(self):
        assert sha_hash_input("é") == hashlib.sha256("é".encode("utf-8")).hexdigest()

    def test_none_input(self):
        assert sha_hash_input(None) is None
