#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Verify command for the crxpub CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from crxpub.console import get_command_logger
from crxpub.exceptions import CrxPubError
from crxpub.package import verify_package

# Get structured logger for this command
log = get_command_logger("verify")


@click.command("verify")
@click.argument(
    "crx_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--expect-id",
    help="Fail unless the CRX is signed by this extension ID.",
)
def verify_command(crx_file: str, expect_id: str | None) -> None:
    """Verifies the header and signature of a CRX file."""
    crx_path = Path(crx_file)
    log.debug("Starting CRX verification", crx=str(crx_path))
    pout(f"🔍 Verifying CRX '{crx_path}'...")

    try:
        result = verify_package(crx_path)
    except (CrxPubError, OSError) as e:
        log.error("Verification failed", error=str(e), crx=str(crx_path))
        perr(f"❌ Verification failed: {e}")
        raise click.Abort() from e

    _display_basic_info(result)
    _display_files(result)
    _check_extension_id(result, expect_id)
    _display_signature_status(result)


def _display_basic_info(result: dict[str, Any]) -> None:
    pout(f"\nPackage Format: {result['format']} (version {result['version']})")
    pout(f"Extension ID: {result['extension_id']}")
    pout(f"Manifest Version: {result['manifest_version'] or 'unknown'}")
    pout(f"Public Key: {result['public_key_length']} bytes")
    pout(f"Signature: {result['signature_length']} bytes")
    pout(f"Payload: {format_size(result['payload_size'])}")


def _display_files(result: dict[str, Any]) -> None:
    if result.get("files"):
        pout("\nFiles:")
        for name in result["files"]:
            pout(f"  - {name}")


def _check_extension_id(result: dict[str, Any], expect_id: str | None) -> None:
    if expect_id and result["extension_id"] != expect_id:
        log.error("Extension ID mismatch", expected=expect_id, actual=result["extension_id"])
        perr(f"\n❌ Extension ID {result['extension_id']} does not match expected {expect_id}")
        raise click.Abort()


def _display_signature_status(result: dict[str, Any]) -> None:
    if result["signature_valid"]:
        log.info("Signature verification successful")
        pout("\n✅ Signature valid")
    else:
        log.error("Signature verification failed")
        perr("\n❌ Signature verification failed")
        raise click.Abort()


# 🧩📦🔚
