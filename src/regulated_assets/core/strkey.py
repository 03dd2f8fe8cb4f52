"""
StrKey account ids
==================

Decoding and validation of Stellar "G..." account ids (SEP-0023 StrKey).

Layout of the decoded bytes:
    version byte (1) | ed25519 public key (32) | CRC16-XModem checksum (2, little endian)
"""

import base64
import binascii

from .exceptions import ValidationError

ACCOUNT_ID_VERSION_BYTE = 6 << 3  # 'G'
ACCOUNT_ID_LENGTH = 56
_PAYLOAD_LENGTH = 32


def crc16_xmodem(data: bytes) -> int:
    """CRC16-XModem (poly 0x1021, init 0) as used by StrKey checksums."""
    return binascii.crc_hqx(data, 0)


def decode_account_id(account_id: str) -> bytes:
    """
    Decode a "G..." account id to its 32-byte ed25519 public key.

    Raises:
        ValidationError: if the id is not a well-formed account StrKey
    """
    if not isinstance(account_id, str) or len(account_id) != ACCOUNT_ID_LENGTH:
        raise ValidationError("Account id must be a 56 character string",
                              details={'account_id': account_id})

    try:
        raw = base64.b32decode(account_id, casefold=False)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"Account id is not valid base32: {e}",
                              details={'account_id': account_id}) from e

    # re-encoding must be canonical, otherwise trailing bits were tampered with
    if base64.b32encode(raw).decode('ascii') != account_id:
        raise ValidationError("Account id is not canonically encoded",
                              details={'account_id': account_id})

    version, payload, checksum = raw[0], raw[1:-2], raw[-2:]
    if version != ACCOUNT_ID_VERSION_BYTE:
        raise ValidationError("Account id has the wrong version byte",
                              details={'account_id': account_id, 'version_byte': version})
    if len(payload) != _PAYLOAD_LENGTH:
        raise ValidationError("Account id payload has the wrong length",
                              details={'account_id': account_id})

    expected = crc16_xmodem(raw[:-2]).to_bytes(2, 'little')
    if checksum != expected:
        raise ValidationError("Account id checksum mismatch",
                              details={'account_id': account_id})

    return bytes(payload)


def encode_account_id(public_key: bytes) -> str:
    """Encode a 32-byte ed25519 public key as a "G..." account id."""
    if len(public_key) != _PAYLOAD_LENGTH:
        raise ValidationError("Public key must be 32 bytes")
    body = bytes([ACCOUNT_ID_VERSION_BYTE]) + public_key
    return base64.b32encode(body + crc16_xmodem(body).to_bytes(2, 'little')).decode('ascii')


def is_valid_account_id(account_id: str) -> bool:
    """Return True if account_id is a syntactically valid "G..." StrKey."""
    try:
        decode_account_id(account_id)
    except ValidationError:
        return False
    return True
