#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""CRX build command for the crxpub CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from crxpub.commands.options import get_channel_config, version_argument
from crxpub.config.defaults import ENV_PRIVATE_KEY_BASE64, ENV_PRIVATE_KEY_PEM
from crxpub.console import get_command_logger
from crxpub.crx import CrxBuilder
from crxpub.exceptions import CrxPubError

# Get structured logger for this command
log = get_command_logger("build")


@click.command("build")
@version_argument
@click.option(
    "--private-key",
    envvar=ENV_PRIVATE_KEY_PEM,
    help=f"PKCS8 PEM private key text [env: {ENV_PRIVATE_KEY_PEM}].",
)
@click.option(
    "--private-key-base64",
    envvar=ENV_PRIVATE_KEY_BASE64,
    help=f"Base64-encoded PEM private key as published by keygen [env: {ENV_PRIVATE_KEY_BASE64}].",
)
@click.pass_context
def build_command(
    ctx: click.Context,
    version: str,
    private_key: str | None,
    private_key_base64: str | None,
) -> None:
    """Builds the signed CRX for VERSION ($RELEASE_VERSION takes precedence)."""
    key_text = private_key or private_key_base64
    if not key_text:
        log.error("No private key supplied")
        perr(f"❌ {ENV_PRIVATE_KEY_PEM} (or {ENV_PRIVATE_KEY_BASE64}) is not set.")
        raise click.Abort()

    config = get_channel_config(ctx)
    log.debug("Starting CRX build", version=version, publish_dir=str(config.publish_path))
    pout(f"🔨 Building CRX (version: {version})...")

    try:
        result = CrxBuilder(config).build(key_text, version)
    except CrxPubError as e:
        log.error("Build failed", error=str(e), version=version)
        perr(f"❌ Build failed: {e}")
        raise click.Abort() from e

    pout(f"✅ Build succeeded: {result.crx_file_name}")
    pout(f"📁 Location: {result.crx_path}")
    pout(f"📋 Extension ID: {result.extension_id}")


# 🧩📦🔚
