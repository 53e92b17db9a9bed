"""
String cipher: str in, base64 str out, and back.

Provides:
 - StringCipher(key, mode)      # mode "gcm" (default) or "ecb" (legacy)
 - get_default_cipher()         # built once from the environment
 - encrypt(plaintext) / decrypt(ciphertext) using the default cipher
"""

import functools
import logging

from stringcipher.common.errors import CipherError, ConfigError, EncodingError
from stringcipher.common.protocol import CipherConfig
from stringcipher.common.utils import base64_decode, base64_encode, key_fingerprint
from stringcipher.config import load_config
from stringcipher.crypto.aes import (
    decrypt_aes,
    decrypt_aes_gcm,
    derive_legacy_key,
    encrypt_aes,
    encrypt_aes_gcm,
    normalize_key,
)

logger = logging.getLogger(__name__)

MODES = ("gcm", "ecb")


class StringCipher:
    """Encrypts and decrypts text with one fixed AES key."""

    def __init__(self, key, mode: str = "gcm"):
        if mode not in MODES:
            raise ConfigError(f"unknown cipher mode {mode!r}, expected one of {MODES}")
        if mode == "ecb":
            if not key:
                raise ConfigError("key must not be empty")
            self._key = derive_legacy_key(key)
        else:
            self._key = normalize_key(key)
        self.mode = mode
        logger.debug("StringCipher ready (mode=%s, key=%s)", mode, key_fingerprint(self._key))

    @classmethod
    def from_config(cls, config: CipherConfig) -> "StringCipher":
        return cls(config.key, config.mode)

    def __repr__(self):
        return f"StringCipher(mode={self.mode!r}, key={key_fingerprint(self._key)})"

    def encrypt(self, plaintext: str) -> str:
        """
        Encode plaintext as UTF-8, encrypt it and return base64 text.
        Raises EncodingError if the text is not encodable.
        """
        if not isinstance(plaintext, str):
            raise TypeError('plaintext must be a str')
        try:
            data = plaintext.encode('utf-8')
        except UnicodeEncodeError as e:
            raise EncodingError(f"plaintext cannot be encoded as UTF-8: {e}") from e

        if self.mode == "ecb":
            ct = encrypt_aes(self._key, data)
        else:
            ct = encrypt_aes_gcm(self._key, data)
        return base64_encode(ct)

    def decrypt(self, ciphertext: str) -> str:
        """
        Decode base64 text, decrypt it and return the plaintext.
        Raises DecodingError for bad base64, CipherError for anything the
        cipher rejects.
        """
        if not isinstance(ciphertext, str):
            raise TypeError('ciphertext must be a str')

        if self.mode == "ecb":
            # Wrapped base64 from older producers
            raw = base64_decode(ciphertext, ignore_whitespace=True)
            data = decrypt_aes(self._key, raw)
        else:
            raw = base64_decode(ciphertext)
            data = decrypt_aes_gcm(self._key, raw)

        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise CipherError("decrypted bytes are not valid UTF-8 (wrong key?)") from e


@functools.lru_cache(maxsize=1)
def get_default_cipher() -> StringCipher:
    """Process-wide cipher built from STRING_CIPHER_KEY / STRING_CIPHER_MODE."""
    return StringCipher.from_config(load_config())


def reset_default_cipher():
    get_default_cipher.cache_clear()


def encrypt(plaintext: str) -> str:
    return get_default_cipher().encrypt(plaintext)


def decrypt(ciphertext: str) -> str:
    return get_default_cipher().decrypt(ciphertext)
