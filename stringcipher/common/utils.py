"""Utility helpers: base64 text codec, key fingerprint."""

import base64
import binascii
import hashlib
import re

from stringcipher.common.errors import DecodingError

_WHITESPACE = re.compile(r"\s+")


def base64_encode(data: bytes) -> str:
    """Encode bytes to a standard, padded base64 string."""
    return base64.b64encode(data).decode('ascii')


def base64_decode(s: str, ignore_whitespace: bool = False) -> bytes:
    """
    Decode a standard base64 string to bytes.
    Raises DecodingError on characters outside the alphabet or bad padding.
    """
    if ignore_whitespace:
        s = _WHITESPACE.sub('', s)
    try:
        return base64.b64decode(s.encode('ascii'), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise DecodingError(f"ciphertext is not valid base64: {e}") from e


def key_fingerprint(key: bytes) -> str:
    """Short SHA-256 prefix identifying a key in logs."""
    return hashlib.sha256(key).hexdigest()[:8]
