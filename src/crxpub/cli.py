#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""crxpub command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from crxpub.commands.build import build_command
from crxpub.commands.keygen import keygen_command
from crxpub.commands.update_xml import update_xml_command
from crxpub.commands.verify import verify_command
from crxpub.config import ChannelConfig, CrxPubRuntimeConfig

# Set up Windows Unicode support early
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    os.environ["PYTHONIOENCODING"] = "utf-8"

__version__ = get_version("crxpub", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="crxpub",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--root-dir",
    type=click.Path(file_okay=False),
    help="Extension source directory containing manifest.json [env: CRXPUB_ROOT_DIR].",
)
@click.option(
    "--deploy-dir",
    type=click.Path(file_okay=False),
    help="Directory with key-info.json and templates/ [env: CRXPUB_DEPLOY_DIR].",
)
@click.option(
    "--publish-dir",
    type=click.Path(file_okay=False),
    help="Output directory served by the static host [env: CRXPUB_PUBLISH_DIR].",
)
@click.pass_context
def cli(
    ctx: click.Context,
    root_dir: str | None,
    deploy_dir: str | None,
    publish_dir: str | None,
) -> None:
    """Self-hosted browser extension update channel tooling.

    Configure logging via environment variables:
    - CRXPUB_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = CrxPubRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="crxpub",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)

    channel_config = ChannelConfig.from_env()
    overrides = {
        name: value
        for name, value in (("root_dir", root_dir), ("deploy_dir", deploy_dir), ("publish_dir", publish_dir))
        if value
    }
    if overrides:
        channel_config = evolve(channel_config, **overrides)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger
    ctx.obj["channel_config"] = channel_config


cli.add_command(keygen_command, name="keygen")
cli.add_command(build_command, name="build")
cli.add_command(update_xml_command, name="update-xml")
cli.add_command(verify_command, name="verify")

main = cli

if __name__ == "__main__":
    cli()

# 🧩📦🔚
