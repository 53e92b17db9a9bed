"""AES primitives: AES-GCM with random nonce, legacy AES-ECB with PKCS#7 padding."""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.backends import default_backend

from stringcipher.common.errors import CipherError, ConfigError

BLOCK_SIZE = algorithms.AES.block_size // 8  # 16
KEY_SIZES = (16, 24, 32)
NONCE_SIZE = 12
TAG_SIZE = 16
LEGACY_KEY_MAX = 32


def derive_legacy_key(secret) -> bytes:
    """
    Key rule of the legacy utility: UTF-8 bytes of the secret, cut to
    16 bytes and zero-padded to 16 bytes (AES-128).
    Secrets longer than 32 bytes never fit the legacy key buffer and are
    rejected rather than truncated.
    """
    if isinstance(secret, str):
        secret = secret.encode('utf-8')
    if not isinstance(secret, (bytes, bytearray)):
        raise ConfigError("key must be str or bytes")
    if len(secret) > LEGACY_KEY_MAX:
        raise ConfigError(
            f"legacy key must be at most {LEGACY_KEY_MAX} bytes, got {len(secret)}"
        )
    return bytes(secret[:BLOCK_SIZE]).ljust(BLOCK_SIZE, b'\0')


def normalize_key(secret) -> bytes:
    """Return the secret as AES key bytes, rejecting unsupported lengths."""
    if isinstance(secret, str):
        secret = secret.encode('utf-8')
    if not isinstance(secret, (bytes, bytearray)):
        raise ConfigError("key must be str or bytes")
    if len(secret) not in KEY_SIZES:
        raise ConfigError(
            f"AES key must be 16, 24 or 32 bytes, got {len(secret)}"
        )
    return bytes(secret)


def encrypt_aes(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt plaintext using AES-ECB.
    Returns ciphertext (no IV).
    """
    # PKCS#7 padding
    padder = padding.PKCS7(128).padder()
    padded_data = padder.update(plaintext) + padder.finalize()

    cipher = Cipher(algorithms.AES(key), modes.ECB(), backend=default_backend())
    encryptor = cipher.encryptor()
    return encryptor.update(padded_data) + encryptor.finalize()


def decrypt_aes(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt ciphertext using AES-ECB.
    Returns plaintext (unpadded).
    """
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise CipherError(
            f"ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )
    cipher = Cipher(algorithms.AES(key), modes.ECB(), backend=default_backend())
    decryptor = cipher.decryptor()
    pt_padded = decryptor.update(ciphertext) + decryptor.finalize()

    # Unpad
    unpadder = padding.PKCS7(128).unpadder()
    try:
        return unpadder.update(pt_padded) + unpadder.finalize()
    except ValueError as e:
        raise CipherError("invalid padding (wrong key or corrupted ciphertext)") from e


def encrypt_aes_gcm(key: bytes, plaintext: bytes) -> bytes:
    """Seal plaintext with AES-GCM. Output is nonce || ciphertext || tag."""
    nonce = os.urandom(NONCE_SIZE)
    return nonce + AESGCM(key).encrypt(nonce, plaintext, None)


def decrypt_aes_gcm(key: bytes, data: bytes) -> bytes:
    if len(data) < NONCE_SIZE + TAG_SIZE:
        raise CipherError(
            f"ciphertext too short: {len(data)} bytes, need at least {NONCE_SIZE + TAG_SIZE}"
        )
    nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
    try:
        return AESGCM(key).decrypt(nonce, sealed, None)
    except InvalidTag as e:
        raise CipherError("authentication failed (wrong key or tampered ciphertext)") from e
