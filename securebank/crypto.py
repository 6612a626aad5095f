"""Password-based file encryption.

An encrypted blob is a 16-byte salt, a 16-byte IV and the AES-256-CBC
ciphertext of the PKCS#7-padded plaintext. The key is derived with
PBKDF2-HMAC-SHA256 over 100,000 iterations.
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "SALT_SIZE",
    "IV_SIZE",
    "KEY_SIZE",
    "PBKDF2_ITERATIONS",
    "CryptoError",
    "derive_key",
    "encrypt_bytes",
    "decrypt_bytes",
    "encrypt_file",
    "decrypt_file",
]

SALT_SIZE = 16
IV_SIZE = 16
KEY_SIZE = 32
PBKDF2_ITERATIONS = 100_000
_BLOCK_SIZE = 16

PathLike = Union[str, "os.PathLike[str]"]


class CryptoError(Exception):
    """Raised when data cannot be decrypted."""


def derive_key(password: str, salt: bytes) -> bytes:
    """Derive a 32-byte AES key from ``password`` and ``salt``."""
    return hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS, KEY_SIZE
    )


def _cipher(key: bytes, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt_bytes(data: bytes, password: str) -> bytes:
    """Encrypt ``data`` under ``password`` with a fresh salt and IV."""
    salt = os.urandom(SALT_SIZE)
    iv = os.urandom(IV_SIZE)
    key = derive_key(password, salt)

    padder = padding.PKCS7(_BLOCK_SIZE * 8).padder()
    padded = padder.update(data) + padder.finalize()
    encryptor = _cipher(key, iv).encryptor()
    return salt + iv + encryptor.update(padded) + encryptor.finalize()


def decrypt_bytes(blob: bytes, password: str) -> bytes:
    """Decrypt a blob produced by :func:`encrypt_bytes`."""
    header = SALT_SIZE + IV_SIZE
    if len(blob) < header:
        raise CryptoError("encrypted data is too short for salt and IV")
    salt, iv, ciphertext = blob[:SALT_SIZE], blob[SALT_SIZE:header], blob[header:]
    if not ciphertext or len(ciphertext) % _BLOCK_SIZE:
        raise CryptoError("ciphertext is not a whole number of blocks")

    key = derive_key(password, salt)
    decryptor = _cipher(key, iv).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(_BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise CryptoError("bad padding: wrong password or corrupt data") from exc


def encrypt_file(in_path: PathLike, out_path: PathLike, password: str) -> None:
    """Encrypt the file at ``in_path`` into ``out_path``."""
    data = Path(in_path).read_bytes()
    Path(out_path).write_bytes(encrypt_bytes(data, password))


def decrypt_file(in_path: PathLike, out_path: PathLike, password: str) -> None:
    """Decrypt the file at ``in_path`` into ``out_path``."""
    blob = Path(in_path).read_bytes()
    Path(out_path).write_bytes(decrypt_bytes(blob, password))