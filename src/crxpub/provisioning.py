#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""One-time (or rotation) setup of a distribution channel's signing identity."""

from __future__ import annotations

from provide.foundation import logger
from provide.foundation.console import pout

from crxpub.config import ChannelConfig
from crxpub.key_info import KeyInfo, save_key_info
from crxpub.keys import encode_private_key_base64, generate_key_pair
from crxpub.manifest import load_manifest, update_manifest_identity
from crxpub.secret_store import SecretPublisher


def setup_channel(
    config: ChannelConfig,
    publish_secret: bool = True,
    publisher: SecretPublisher | None = None,
) -> KeyInfo:
    """Generate a new key pair and wire it into the channel.

    Steps run in order and stop at the first fatal error:
    generate keys, publish the private key, update manifest.json,
    write key-info.json. The private key is never written to disk.

    Args:
        config: Channel paths and names
        publish_secret: Register the key in the secret store. When False the
            base64 key is printed for the operator instead.
        publisher: Secret publisher override (defaults to one built from config)

    Returns:
        The saved KeyInfo record

    Raises:
        ManifestError: If manifest.json is missing or unreadable
        ExternalRegistrationError: If the secret could not be registered
    """
    # Fail before generating anything if the manifest cannot be updated later
    load_manifest(config.manifest_path)

    keys = generate_key_pair()

    if publish_secret:
        publisher = publisher or SecretPublisher(config.secret_name, config.legacy_secret_name)
        publisher.publish(keys.private_key_pem)
    else:
        logger.warning("Secret publication skipped; store the printed key yourself", secret=config.secret_name)
        pout(f"📋 Base64 private key for {config.secret_name} (single line):")
        pout(encode_private_key_base64(keys.private_key_pem))

    update_manifest_identity(config.manifest_path, config.update_url, keys.manifest_key)

    key_info = KeyInfo.from_keys(keys, config.update_url)
    save_key_info(config.key_info_path, key_info)
    return key_info


# 🧩📦🔚
