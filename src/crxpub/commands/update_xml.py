#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""update.xml command for the crxpub CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from crxpub.commands.options import get_channel_config, version_argument
from crxpub.console import get_command_logger
from crxpub.exceptions import CrxPubError
from crxpub.update import UpdateXmlGenerator

# Get structured logger for this command
log = get_command_logger("update-xml")


@click.command("update-xml")
@version_argument
@click.option(
    "--status-page/--no-status-page",
    default=True,
    show_default=True,
    help="Also write index.html to the publish directory.",
)
@click.pass_context
def update_xml_command(ctx: click.Context, version: str, status_page: bool) -> None:
    """Generates update.xml for an already built VERSION ($RELEASE_VERSION takes precedence)."""
    config = get_channel_config(ctx)
    log.debug("Generating update.xml", version=version, publish_dir=str(config.publish_path))

    try:
        result = UpdateXmlGenerator(config).generate(version, status_page=status_page)
    except CrxPubError as e:
        log.error("update.xml generation failed", error=str(e), version=version)
        perr(f"❌ update.xml generation failed: {e}")
        raise click.Abort() from e

    pout(f"✅ update.xml written: {result.update_xml_path}")
    pout(f"🌐 CRX URL: {result.crx_url}")
    pout(f"🌐 Update URL: {config.update_url}")
    pout(f"📋 Extension ID: {result.extension_id}")


# 🧩📦🔚
