"""Operaciones de clave pública RSA para verificar webhooks."""

from __future__ import annotations

import base64

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.hashes import SHA256


MIN_KEY_BITS = 2048
MAX_KEY_BITS = 8192


def strip_pem_armor(pem: str) -> str:
    """Quita las líneas "-----BEGIN/END ...-----" y une el resto."""
    return "".join(
        line.strip()
        for line in pem.splitlines()
        if not line.startswith("-----")
    )


def public_numbers_from_pem(pem: str) -> rsa.RSAPublicNumbers:
    """
    Extrae módulo y exponente de una clave pública PEM.

    Acepta SubjectPublicKeyInfo ("PUBLIC KEY") y PKCS#1 ("RSA PUBLIC KEY").

    Raises:
        ValueError: Si la clave no es RSA o no se puede decodificar
    """
    der = base64.b64decode(strip_pem_armor(pem), validate=True)
    key = serialization.load_der_public_key(der)

    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("Certificate does not hold an RSA public key")

    return key.public_numbers()


def verify_pkcs1_sha256(
    numbers: rsa.RSAPublicNumbers,
    message: bytes,
    signature: bytes,
) -> None:
    """
    Verifica una firma RSA PKCS#1 v1.5 con SHA-256.

    Raises:
        ValueError: Si el tamaño de clave está fuera de 2048-8192 bits
        cryptography.exceptions.InvalidSignature: Si la firma no coincide
    """
    key_bits = numbers.n.bit_length()
    if not MIN_KEY_BITS <= key_bits <= MAX_KEY_BITS:
        raise ValueError(f"RSA key size {key_bits} out of range")

    numbers.public_key().verify(
        signature,
        message,
        padding.PKCS1v15(),
        SHA256(),
    )
