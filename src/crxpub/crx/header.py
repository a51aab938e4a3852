#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""CRX header packing and parsing.

Layout (all integers little-endian uint32)::

    0        magic "Cr24"
    4        format version
    8        N = public key length
    12       M = signature length
    16       public key (DER SubjectPublicKeyInfo)
    16+N     signature over the zip payload
    16+N+M   zip payload
"""

from __future__ import annotations

from attrs import frozen
from provide.foundation import logger

from crxpub.crx.constants import (
    CRX_FORMAT_VERSION,
    CRX_HEADER_PREFIX,
    CRX_HEADER_PREFIX_SIZE,
    CRX_MAGIC,
)
from crxpub.exceptions import CrxFormatError


@frozen
class CrxHeader:
    """Header preceding the zip payload of a CRX file."""

    public_key: bytes
    signature: bytes
    version: int = CRX_FORMAT_VERSION

    @property
    def size(self) -> int:
        return CRX_HEADER_PREFIX_SIZE + len(self.public_key) + len(self.signature)

    def pack(self) -> bytes:
        prefix = CRX_HEADER_PREFIX.pack(CRX_MAGIC, self.version, len(self.public_key), len(self.signature))
        header = prefix + self.public_key + self.signature
        logger.debug(
            "Packed CRX header",
            size=len(header),
            public_key_length=len(self.public_key),
            signature_length=len(self.signature),
        )
        return header

    @classmethod
    def unpack(cls, data: bytes) -> CrxHeader:
        """Parse the header at the start of ``data``.

        Raises:
            CrxFormatError: On bad magic, unsupported version or truncation.
        """
        if len(data) < CRX_HEADER_PREFIX_SIZE:
            raise CrxFormatError(f"File too small for a CRX header ({len(data)} bytes)")

        magic, version, key_length, signature_length = CRX_HEADER_PREFIX.unpack_from(data)
        if magic != CRX_MAGIC:
            raise CrxFormatError(f"Not a CRX file: magic {magic!r} != {CRX_MAGIC!r}")
        if version != CRX_FORMAT_VERSION:
            raise CrxFormatError(f"Unsupported CRX format version {version}, expected {CRX_FORMAT_VERSION}")

        key_end = CRX_HEADER_PREFIX_SIZE + key_length
        signature_end = key_end + signature_length
        if len(data) < signature_end:
            raise CrxFormatError(
                f"Truncated CRX header: need {signature_end} bytes, file has {len(data)}"
            )

        return cls(
            public_key=bytes(data[CRX_HEADER_PREFIX_SIZE:key_end]),
            signature=bytes(data[key_end:signature_end]),
            version=version,
        )


# 🧩📦🔚
