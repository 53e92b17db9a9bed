"""Exceptions raised by the string cipher."""


class StringCipherError(Exception):
    """Base class for every failure raised by this package."""


class EncodingError(StringCipherError):
    """Plaintext could not be converted to UTF-8 bytes."""


class DecodingError(StringCipherError):
    """Ciphertext text is not valid base64."""


class CipherError(StringCipherError):
    """Decryption failed: bad padding, bad tag, bad length or wrong key."""


class ConfigError(StringCipherError):
    """Key or mode is not usable."""
