#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reading, checking and rewriting the extension's manifest.json."""

from __future__ import annotations

import copy
import json
from pathlib import Path
import re
from typing import Any

from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.formats import read_json

from crxpub.config.defaults import (
    DISTRIBUTION_ONLY_FIELDS,
    MANIFEST_KEY_FIELD,
    MANIFEST_UPDATE_URL_FIELD,
    MANIFEST_VERSION_FIELD,
)
from crxpub.exceptions import ManifestError, VersionMismatchError

# Browsers accept one to four dot-separated integers
VERSION_PATTERN = re.compile(r"^\d+(\.\d+){0,3}$")


def is_valid_version(version: str) -> bool:
    """Return True for dotted numeric versions such as ``1.6.2``."""
    return bool(VERSION_PATTERN.match(version))


def load_manifest(manifest_path: Path) -> dict[str, Any]:
    """Load manifest.json as a dictionary."""
    if not manifest_path.is_file():
        raise ManifestError(f"manifest.json not found: {manifest_path}")

    try:
        manifest = read_json(manifest_path)
    except (OSError, ValueError) as e:
        raise ManifestError(f"Could not read manifest.json ({manifest_path}): {e}") from e

    # read_json yields None for unparseable content
    if not isinstance(manifest, dict):
        raise ManifestError(f"manifest.json must contain a JSON object: {manifest_path}")
    # read_json may hand back a cached object shared with other reads
    return copy.deepcopy(manifest)


def validate_version(manifest_path: Path, expected_version: str) -> dict[str, Any]:
    """Check that manifest.json declares exactly ``expected_version``.

    Returns the loaded manifest so callers do not read it twice.

    Raises:
        VersionMismatchError: If the declared version differs.
    """
    manifest = load_manifest(manifest_path)
    declared = manifest.get(MANIFEST_VERSION_FIELD)
    if declared != expected_version:
        logger.error(
            "Version mismatch",
            manifest_version=declared,
            expected_version=expected_version,
        )
        raise VersionMismatchError(declared, expected_version)

    logger.info("✅ Version check passed", version=expected_version)
    return manifest


def packaged_manifest(manifest: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of the manifest with distribution-only fields removed.

    The update URL only belongs in the externally served manifest; the copy
    packed into the CRX must never point at an update channel.
    """
    packed = copy.deepcopy(manifest)
    for field_name in DISTRIBUTION_ONLY_FIELDS:
        packed.pop(field_name, None)
    return packed


def serialize_manifest(manifest: dict[str, Any]) -> str:
    """Serialize a manifest the way it is stored on disk."""
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def manifest_public_key(manifest: dict[str, Any]) -> str | None:
    """Return the base64 ``key`` field, if one has been committed."""
    key = manifest.get(MANIFEST_KEY_FIELD)
    return key if isinstance(key, str) and key.strip() else None


def update_manifest_identity(manifest_path: Path, update_url: str, manifest_key: str) -> dict[str, Any]:
    """Write the update URL and public key into manifest.json in place."""
    manifest = {
        **load_manifest(manifest_path),
        MANIFEST_UPDATE_URL_FIELD: update_url,
        MANIFEST_KEY_FIELD: manifest_key,
    }

    atomic_write_text(manifest_path, serialize_manifest(manifest))
    logger.info("📝 manifest.json updated", path=str(manifest_path), update_url=update_url)
    return manifest


# 🧩📦🔚
