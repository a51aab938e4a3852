#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolving the extension ID already committed to a channel."""

from __future__ import annotations

from typing import Any

from provide.foundation import logger

from crxpub.config import ChannelConfig
from crxpub.exceptions import IdentifierUnavailableError, InvalidKeyFormatError
from crxpub.key_info import load_key_info
from crxpub.keys import decode_manifest_key, derive_extension_id
from crxpub.manifest import load_manifest, manifest_public_key


def committed_extension_id(config: ChannelConfig, manifest: dict[str, Any] | None = None) -> str | None:
    """Return the channel's extension ID, or None if it cannot be determined.

    key-info.json wins; otherwise the ID is recomputed from the ``key``
    field of manifest.json.
    """
    key_info = load_key_info(config.key_info_path)
    if key_info and key_info.extension_id:
        logger.debug("Extension ID from key info", extension_id=key_info.extension_id)
        return key_info.extension_id

    if manifest is None:
        manifest = load_manifest(config.manifest_path)

    manifest_key = manifest_public_key(manifest)
    if manifest_key is None:
        return None

    try:
        extension_id = derive_extension_id(decode_manifest_key(manifest_key))
    except InvalidKeyFormatError as e:
        logger.warning("Ignoring unusable manifest key", error=str(e))
        return None

    logger.debug("Extension ID from manifest key", extension_id=extension_id)
    return extension_id


def require_extension_id(config: ChannelConfig, manifest: dict[str, Any] | None = None) -> str:
    """Like ``committed_extension_id`` but fails when nothing is available."""
    extension_id = committed_extension_id(config, manifest)
    if extension_id is None:
        raise IdentifierUnavailableError(
            "Extension ID not found. Run 'crxpub keygen' first to create key-info.json "
            "and the manifest key."
        )
    return extension_id


# 🧩📦🔚
