#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Key generation command for the crxpub CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from crxpub.commands.options import get_channel_config
from crxpub.console import get_command_logger
from crxpub.exceptions import CrxPubError
from crxpub.provisioning import setup_channel

# Get structured logger for this command
log = get_command_logger("keygen")


@click.command("keygen")
@click.option(
    "--publish-secret/--no-publish-secret",
    default=True,
    show_default=True,
    help="Register the private key in the repository secret store via the gh CLI.",
)
@click.pass_context
def keygen_command(ctx: click.Context, publish_secret: bool) -> None:
    """Generates the channel's RSA signing key and records its extension ID."""
    config = get_channel_config(ctx)
    log.debug("Generating channel key", manifest=str(config.manifest_path), publish_secret=publish_secret)
    pout("🚀 Generating extension key and channel settings...")

    try:
        key_info = setup_channel(config, publish_secret=publish_secret)
    except CrxPubError as e:
        log.error("Keygen failed", error=str(e))
        perr(f"❌ Keygen failed: {e}")
        raise click.Abort() from e

    log.info("Key pair generated successfully", extension_id=key_info.extension_id)
    pout("🎉 Extension key setup complete!")
    pout(f"📋 Extension ID: {key_info.extension_id}")
    pout(f"🌐 Update URL: {key_info.update_url}")
    pout(f"💾 Key info: {config.key_info_path}")
    pout("Next steps:")
    pout("  1. Enable static hosting for the publish directory")
    pout("  2. Commit manifest.json and key-info.json")
    pout("  3. Cut a release to run crxpub build and crxpub update-xml")


# 🧩📦🔚
