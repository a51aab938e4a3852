#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Signed CRX package builder."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write, ensure_dir
from provide.foundation.formatting import format_size

from crxpub.config import ChannelConfig
from crxpub.crx.archive import create_payload
from crxpub.crx.header import CrxHeader
from crxpub.exceptions import IdentityMismatchError
from crxpub.identity import committed_extension_id
from crxpub.keys import derive_extension_id, load_private_key, public_key_der, sign_payload
from crxpub.manifest import packaged_manifest, validate_version


@frozen
class BuildResult:
    """Where a build put its CRX and which identity signed it."""

    crx_path: Path
    crx_file_name: str
    extension_id: str
    size: int


class CrxBuilder:
    """Builds ``<prefix>-<version>.crx`` into the channel's publish directory."""

    def __init__(self, config: ChannelConfig) -> None:
        self.config = config

    def build(self, private_key_pem: str, version: str) -> BuildResult:
        """Validate, package, sign and write the CRX for ``version``.

        Args:
            private_key_pem: PKCS8 PEM text; single-line and base64-wrapped
                forms are accepted as well
            version: Must equal the manifest.json version

        Raises:
            VersionMismatchError: Before anything is packaged
            MissingSourceFileError: In strict mode only
            InvalidKeyFormatError: If the key cannot be parsed
            IdentityMismatchError: If the key does not match the committed ID
        """
        logger.info("🔨 Building CRX", version=version)
        manifest = validate_version(self.config.manifest_path, version)

        payload = create_payload(
            self.config.root_path,
            packaged_manifest(manifest),
            self.config.include_files,
            strict=self.config.strict_files,
        )

        logger.debug("🔑 Signing ZIP payload")
        private_key = load_private_key(private_key_pem)
        signature = sign_payload(private_key, payload.data)
        der = public_key_der(private_key.public_key())
        extension_id = derive_extension_id(der)

        self._check_identity(extension_id, manifest)

        header = CrxHeader(public_key=der, signature=signature)
        crx_bytes = header.pack() + payload.data

        crx_file_name = self.config.crx_file_name(version)
        crx_path = self.config.crx_path(version)
        ensure_dir(crx_path.parent)
        atomic_write(crx_path, crx_bytes)

        logger.info(
            "✅ CRX written",
            file=crx_file_name,
            path=str(crx_path),
            size=format_size(len(crx_bytes)),
            extension_id=extension_id,
        )
        return BuildResult(
            crx_path=crx_path,
            crx_file_name=crx_file_name,
            extension_id=extension_id,
            size=len(crx_bytes),
        )

    def _check_identity(self, extension_id: str, manifest: dict[str, Any]) -> None:
        expected = committed_extension_id(self.config, manifest)
        if expected is None:
            logger.warning(
                "No committed extension ID to compare against; run 'crxpub keygen' to record one",
                extension_id=extension_id,
            )
            return
        if expected != extension_id:
            raise IdentityMismatchError(
                f"Signing key belongs to extension {extension_id}, but the channel is committed "
                f"to {expected}. Use the key published by keygen or regenerate the channel."
            )


# 🧩📦🔚
