#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RSA key handling for CRX signing.

Covers key pair generation, the extension ID derivation browsers use,
private key PEM normalization for keys that went through a secret store,
and signing/verification of CRX payloads.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from attrs import frozen
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from provide.foundation import logger

from crxpub.config.defaults import PEM_LINE_LENGTH, RSA_KEY_SIZE, RSA_PUBLIC_EXPONENT
from crxpub.exceptions import InvalidKeyFormatError

EXTENSION_ID_ALPHABET = "abcdefghijklmnop"
EXTENSION_ID_LENGTH = 32

_PEM_BLOCK = re.compile(r"-----BEGIN ([A-Z ]+)-----(.*?)-----END \1-----", re.DOTALL)


@frozen
class GeneratedKeys:
    """A freshly generated signing identity.

    Only ``private_key_pem`` is secret; everything else may be committed.
    """

    private_key_pem: str
    public_key_pem: str
    public_key_der: bytes
    manifest_key: str
    extension_id: str


def generate_key_pair() -> GeneratedKeys:
    """Generate an RSA-2048 key pair and derive the extension identity."""
    logger.debug("Generating RSA key pair", key_size=RSA_KEY_SIZE)
    private_key = rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_SIZE)

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("ascii")
    )
    der = public_key_der(private_key.public_key())

    keys = GeneratedKeys(
        private_key_pem=private_pem,
        public_key_pem=public_pem,
        public_key_der=der,
        manifest_key=encode_manifest_key(der),
        extension_id=derive_extension_id(der),
    )
    logger.info("✅ Key pair generated", extension_id=keys.extension_id)
    return keys


def public_key_der(public_key: rsa.RSAPublicKey) -> bytes:
    """Export a public key as DER-encoded SubjectPublicKeyInfo."""
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def derive_extension_id(public_key_der_bytes: bytes) -> str:
    """Derive the 32 character extension ID from a DER public key.

    The first 16 bytes of the SHA-256 digest are written as hex and every
    nibble 0-15 is mapped onto the letters a-p.
    """
    digest = hashlib.sha256(public_key_der_bytes).digest()[:16]
    return "".join(EXTENSION_ID_ALPHABET[int(nibble, 16)] for nibble in digest.hex())


def is_valid_extension_id(value: object) -> bool:
    """Return True for a 32 character string over the letters a-p."""
    return (
        isinstance(value, str)
        and len(value) == EXTENSION_ID_LENGTH
        and all(char in EXTENSION_ID_ALPHABET for char in value)
    )


def encode_manifest_key(public_key_der_bytes: bytes) -> str:
    """Encode a DER public key as the manifest.json ``key`` value."""
    return base64.b64encode(public_key_der_bytes).decode("ascii")


def decode_manifest_key(manifest_key: str) -> bytes:
    """Decode a manifest.json ``key`` value back into DER bytes."""
    try:
        return base64.b64decode(manifest_key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidKeyFormatError(f"Manifest key is not valid base64: {e}") from e


def normalize_private_key_pem(key_text: str) -> str:
    """Restore PEM line structure lost in secret storage.

    Keys that already contain line breaks are returned unchanged. A key
    flattened to a single line gets its BEGIN/END markers on their own lines
    and its body wrapped at 64 characters.
    """
    if "\\n" in key_text and "\n" not in key_text:
        key_text = key_text.replace("\\n", "\n")

    if "\n" in key_text:
        return key_text

    match = _PEM_BLOCK.search(key_text)
    if not match:
        return key_text

    label = match.group(1)
    body = "".join(match.group(2).split())
    lines = [body[i : i + PEM_LINE_LENGTH] for i in range(0, len(body), PEM_LINE_LENGTH)]
    logger.debug("Rebuilt single-line PEM", label=label, body_lines=len(lines))
    return "\n".join([f"-----BEGIN {label}-----", *lines, f"-----END {label}-----"]) + "\n"


def decode_private_key_base64(value: str) -> str:
    """Decode a base64-wrapped PEM private key (the published secret format)."""
    try:
        decoded = base64.b64decode("".join(value.split()), validate=True).decode("ascii")
    except (binascii.Error, ValueError) as e:
        raise InvalidKeyFormatError(f"Private key is neither PEM nor base64-encoded PEM: {e}") from e
    if "-----BEGIN" not in decoded:
        raise InvalidKeyFormatError("Base64 private key does not contain a PEM block")
    return decoded


def encode_private_key_base64(private_key_pem: str) -> str:
    """Wrap a PEM private key into a single-line base64 string."""
    return base64.b64encode(private_key_pem.encode("ascii")).decode("ascii")


def load_private_key(key_text: str) -> rsa.RSAPrivateKey:
    """Parse private key text into an RSA key.

    Accepts PEM (single-line or not) and base64-wrapped PEM.

    Raises:
        InvalidKeyFormatError: If the key cannot be parsed or is not RSA.
    """
    text = key_text.strip()
    if not text:
        raise InvalidKeyFormatError("Private key is empty")
    if "-----BEGIN" not in text:
        text = decode_private_key_base64(text)

    normalized = normalize_private_key_pem(text)
    try:
        private_key = serialization.load_pem_private_key(normalized.encode("ascii"), password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm, UnicodeEncodeError) as e:
        raise InvalidKeyFormatError(f"Failed to load private key: {e}") from e

    if not isinstance(private_key, rsa.RSAPrivateKey):
        key_type = type(private_key).__name__
        raise InvalidKeyFormatError(
            f"Incompatible key type: {key_type}. CRX signing requires an RSA key. "
            "Generate one with: crxpub keygen"
        )
    return private_key


def sign_payload(private_key: rsa.RSAPrivateKey, payload: bytes) -> bytes:
    """Sign payload bytes with RSA PKCS#1 v1.5 over SHA-256."""
    return private_key.sign(payload, padding.PKCS1v15(), hashes.SHA256())


def verify_signature(public_key_der_bytes: bytes, payload: bytes, signature: bytes) -> bool:
    """Check an RSA-SHA256 signature against a DER public key."""
    try:
        public_key = serialization.load_der_public_key(public_key_der_bytes)
    except (ValueError, UnsupportedAlgorithm):
        logger.warning("Embedded public key could not be parsed", size=len(public_key_der_bytes))
        return False
    if not isinstance(public_key, rsa.RSAPublicKey):
        logger.warning("Embedded public key is not RSA", key_type=type(public_key).__name__)
        return False

    try:
        public_key.verify(signature, payload, padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature:
        return False
    return True


# 🧩📦🔚
