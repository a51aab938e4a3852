#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for the crxpub toolkit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from crxpub.config import ChannelConfig
from crxpub.crx import BuildResult, CrxBuilder, verify_crx
from crxpub.key_info import KeyInfo
from crxpub.provisioning import setup_channel
from crxpub.update import UpdateXmlGenerator, UpdateXmlResult


def generate_keys(config: ChannelConfig | None = None, publish_secret: bool = True) -> KeyInfo:
    """Generate the channel signing key and record its identity.

    Updates manifest.json with ``update_url`` and ``key``, publishes the
    private key to the secret store and writes key-info.json.

    Args:
        config: Channel configuration (default: loaded from the environment)
        publish_secret: Register the key with ``gh secret set``

    Returns:
        The saved KeyInfo record

    Example:
        ```python
        from crxpub import generate_keys

        info = generate_keys(publish_secret=False)
        print(info.extension_id)
        ```
    """
    return setup_channel(config or ChannelConfig.from_env(), publish_secret=publish_secret)


def build_crx(private_key_pem: str, version: str, config: ChannelConfig | None = None) -> BuildResult:
    """Build and sign the CRX for ``version``.

    Args:
        private_key_pem: Private key PEM (single-line and base64 forms accepted)
        version: Must equal the version in manifest.json
        config: Channel configuration (default: loaded from the environment)

    Returns:
        BuildResult with the CRX path, file name and extension ID

    Raises:
        VersionMismatchError: If ``version`` differs from manifest.json
        InvalidKeyFormatError: If the key cannot be parsed
        IdentityMismatchError: If the key does not match the committed ID

    Example:
        ```python
        import os
        from crxpub import build_crx

        result = build_crx(os.environ["CRX_PRIVATE_KEY_PEM"], "1.6.2")
        print(result.crx_path)
        ```
    """
    return CrxBuilder(config or ChannelConfig.from_env()).build(private_key_pem, version)


def generate_update_xml(
    version: str,
    config: ChannelConfig | None = None,
    status_page: bool = True,
) -> UpdateXmlResult:
    """Write update.xml (and optionally index.html) for a built version.

    Raises:
        VersionMismatchError: If ``version`` differs from manifest.json
        MissingArtifactError: If the CRX has not been built
        IdentifierUnavailableError: If no extension ID can be resolved
    """
    return UpdateXmlGenerator(config or ChannelConfig.from_env()).generate(version, status_page=status_page)


def verify_package(crx_path: Path) -> dict[str, Any]:
    """Verify the structure and signature of a CRX file.

    Returns:
        Dictionary with ``format``, ``version``, ``extension_id``,
        ``signature_valid``, ``manifest_version`` and size details.

    Raises:
        CrxFormatError: If the file is not a CRX3 package
    """
    return verify_crx(crx_path)


# 🧩📦🔚
