#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reading and verifying CRX files."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any
import zipfile

from attrs import frozen
from provide.foundation import logger

from crxpub.config.defaults import MANIFEST_FILE
from crxpub.crx.constants import CRX_FORMAT_NAME
from crxpub.crx.header import CrxHeader
from crxpub.keys import derive_extension_id, verify_signature


@frozen
class CrxFile:
    """A parsed CRX: header plus zip payload."""

    header: CrxHeader
    payload: bytes

    @property
    def extension_id(self) -> str:
        return derive_extension_id(self.header.public_key)

    def signature_valid(self) -> bool:
        return verify_signature(self.header.public_key, self.payload, self.header.signature)

    def packaged_manifest(self) -> dict[str, Any] | None:
        """Return manifest.json from the payload, if it can be read."""
        try:
            with zipfile.ZipFile(io.BytesIO(self.payload)) as archive:
                manifest = json.loads(archive.read(MANIFEST_FILE).decode("utf-8"))
        except (zipfile.BadZipFile, KeyError, ValueError) as e:
            logger.warning("Could not read packaged manifest", error=str(e))
            return None
        return manifest if isinstance(manifest, dict) else None

    def file_names(self) -> list[str]:
        try:
            with zipfile.ZipFile(io.BytesIO(self.payload)) as archive:
                return archive.namelist()
        except zipfile.BadZipFile:
            return []


def parse_crx(data: bytes) -> CrxFile:
    """Split raw CRX bytes into header and payload."""
    header = CrxHeader.unpack(data)
    return CrxFile(header=header, payload=bytes(data[header.size :]))


def read_crx(crx_path: Path) -> CrxFile:
    """Read and parse a CRX file from disk."""
    return parse_crx(crx_path.read_bytes())


def verify_crx(crx_path: Path) -> dict[str, Any]:
    """Verify a CRX file's structure and signature.

    Returns:
        Dictionary with keys ``format``, ``version``, ``public_key_length``,
        ``signature_length``, ``payload_size``, ``extension_id``,
        ``signature_valid``, ``manifest_version`` and ``files``.

    Raises:
        CrxFormatError: If the header is malformed.
    """
    crx = read_crx(crx_path)
    manifest = crx.packaged_manifest()
    signature_valid = crx.signature_valid()

    result = {
        "format": CRX_FORMAT_NAME,
        "version": crx.header.version,
        "public_key_length": len(crx.header.public_key),
        "signature_length": len(crx.header.signature),
        "payload_size": len(crx.payload),
        "extension_id": crx.extension_id,
        "signature_valid": signature_valid,
        "manifest_version": manifest.get("version") if manifest else None,
        "files": crx.file_names(),
    }
    logger.debug("CRX verified", path=str(crx_path), signature_valid=signature_valid)
    return result


# 🧩📦🔚
