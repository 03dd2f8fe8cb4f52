"""
Tests for StrKey account id decoding and validation.
"""

import pytest

from regulated_assets.core.exceptions import ValidationError
from regulated_assets.core.strkey import (
    crc16_xmodem,
    decode_account_id,
    encode_account_id,
    is_valid_account_id,
)

ZERO_ACCOUNT_ID = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"


class TestCrc16:
    def test_known_check_value(self):
        # standard XModem check value for "123456789"
        assert crc16_xmodem(b"123456789") == 0x31C3

    def test_empty_input(self):
        assert crc16_xmodem(b"") == 0


class TestAccountIdValidation:
    """Valid and invalid "G..." account ids."""

    def test_zero_key_account_id(self):
        assert decode_account_id(ZERO_ACCOUNT_ID) == bytes(32)

    def test_real_account_id_is_valid(self, issuer_id):
        assert is_valid_account_id(issuer_id) is True
        assert len(decode_account_id(issuer_id)) == 32

    def test_encode_matches_known_id(self):
        assert encode_account_id(bytes(32)) == ZERO_ACCOUNT_ID

    def test_encoded_key_decodes_back(self):
        key = bytes(range(32))
        assert decode_account_id(encode_account_id(key)) == key

    def test_bad_checksum_rejected(self, issuer_id):
        tampered = issuer_id[:-1] + ("M" if issuer_id[-1] != "M" else "N")
        assert is_valid_account_id(tampered) is False

    def test_wrong_length_rejected(self, issuer_id):
        assert is_valid_account_id(issuer_id[:-1]) is False
        assert is_valid_account_id(issuer_id + "A") is False

    def test_lowercase_rejected(self, issuer_id):
        assert is_valid_account_id(issuer_id.lower()) is False

    def test_non_base32_characters_rejected(self):
        assert is_valid_account_id("G" + "1" * 55) is False

    def test_wrong_version_byte_rejected(self):
        # Same zero payload encoded with the secret seed version byte would start with 'S'
        assert is_valid_account_id("S" + ZERO_ACCOUNT_ID[1:]) is False

    @pytest.mark.parametrize("value", [None, 42, "", "not-an-account"])
    def test_garbage_rejected(self, value):
        assert is_valid_account_id(value) is False

    def test_decode_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            decode_account_id("GABC")
        assert exc_info.value.details["account_id"] == "GABC"

    def test_encode_requires_32_bytes(self):
        with pytest.raises(ValidationError):
            encode_account_id(b"short")
