#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""update.xml generation for the browser's update check."""

from __future__ import annotations

import hashlib
from pathlib import Path

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write_text, ensure_dir
from provide.foundation.formatting import format_size

from crxpub.config import ChannelConfig
from crxpub.exceptions import MissingArtifactError
from crxpub.identity import require_extension_id
from crxpub.manifest import validate_version
from crxpub.update.status_page import write_status_page
from crxpub.update.template import (
    PLACEHOLDER_CRX_SHA256,
    PLACEHOLDER_CRX_URL,
    PLACEHOLDER_EXTENSION_ID,
    PLACEHOLDER_VERSION,
    load_template,
    render_template,
)


@frozen
class UpdateXmlResult:
    update_xml_path: Path
    crx_url: str
    extension_id: str
    status_page_path: Path | None = None


class UpdateXmlGenerator:
    """Renders update.xml (and index.html) for a version that has been built."""

    def __init__(self, config: ChannelConfig) -> None:
        self.config = config

    def generate(self, version: str, status_page: bool = True) -> UpdateXmlResult:
        """Write update.xml for ``version``.

        Raises:
            VersionMismatchError: If manifest.json declares another version
            MissingArtifactError: If the CRX for ``version`` is absent or empty
            IdentifierUnavailableError: If no extension ID can be resolved
        """
        logger.info("📝 Generating update.xml", version=version)
        manifest = validate_version(self.config.manifest_path, version)
        crx_path = self.validate_crx_file(version)
        extension_id = require_extension_id(self.config, manifest)

        crx_url = self.config.crx_url(version)
        template = load_template(self.config.template_path)
        update_xml = render_template(
            template,
            {
                PLACEHOLDER_VERSION: version,
                PLACEHOLDER_EXTENSION_ID: extension_id,
                PLACEHOLDER_CRX_URL: crx_url,
                PLACEHOLDER_CRX_SHA256: file_sha256(crx_path),
            },
        )

        update_xml_path = self.config.update_xml_path
        ensure_dir(update_xml_path.parent)
        atomic_write_text(update_xml_path, update_xml)
        logger.info(
            "✅ update.xml written",
            path=str(update_xml_path),
            crx_url=crx_url,
            extension_id=extension_id,
        )

        status_page_path = None
        if status_page:
            status_page_path = write_status_page(
                self.config.status_page_path,
                name=self.config.extension_name,
                version=version,
                extension_id=extension_id,
                update_url=self.config.update_url,
                crx_file_name=self.config.crx_file_name(version),
            )

        return UpdateXmlResult(
            update_xml_path=update_xml_path,
            crx_url=crx_url,
            extension_id=extension_id,
            status_page_path=status_page_path,
        )

    def validate_crx_file(self, version: str) -> Path:
        """Check that the CRX for ``version`` exists and is not empty."""
        crx_path = self.config.crx_path(version)
        if not crx_path.is_file() or crx_path.stat().st_size == 0:
            raise MissingArtifactError(f"CRX file not found: {crx_path.name} (expected at {crx_path})")

        logger.info("✅ CRX file found", file=crx_path.name, size=format_size(crx_path.stat().st_size))
        return crx_path


def file_sha256(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(64 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


# 🧩📦🔚
