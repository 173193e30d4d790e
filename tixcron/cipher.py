"""SHA-256 digest helpers."""

import hashlib


def generate_sha256(private_key: str, payload: str) -> bytes:
    """Raw SHA-256 digest of the payload; the key is not used."""
    return hashlib.sha256(payload.encode("utf-8")).digest()


def generate_sha256_encoded(private_key: str, payload: str) -> str:
    """Hex-encoded SHA-256 digest of the payload; the key is not used."""
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()