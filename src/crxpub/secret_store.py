#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Publishing the signing key to the CI secret store through the ``gh`` CLI.

The call is synchronous with no timeout or retry; a hung ``gh`` process
blocks keygen until it is interrupted.
"""

from __future__ import annotations

from provide.foundation import logger
from provide.foundation.console import perr, pout
from provide.foundation.process import run

from crxpub.config.defaults import SECRET_STORE_CLI
from crxpub.exceptions import ExternalRegistrationError
from crxpub.keys import encode_private_key_base64


class SecretPublisher:
    """Stores the base64 private key as a repository secret."""

    def __init__(self, secret_name: str, legacy_secret_name: str | None = None) -> None:
        self.secret_name = secret_name
        self.legacy_secret_name = legacy_secret_name

    def publish(self, private_key_pem: str) -> None:
        """Set the secret, then remove the legacy one.

        Raises:
            ExternalRegistrationError: If the secret could not be set. The key
                is printed to the terminal first so it is not lost.
        """
        private_key_b64 = encode_private_key_base64(private_key_pem)
        logger.info("🔒 Publishing private key to secret store", secret=self.secret_name)

        try:
            run(
                [SECRET_STORE_CLI, "secret", "set", self.secret_name, "--body", private_key_b64],
                capture_output=True,
                check=True,
            )
        except Exception as e:
            logger.error("Secret registration failed", secret=self.secret_name, error=str(e))
            print_key_for_manual_setup(self.secret_name, private_key_b64)
            raise ExternalRegistrationError(f"Failed to set secret {self.secret_name}: {e}") from e

        logger.info("✅ Secret registered", secret=self.secret_name)
        self.remove_legacy_secret()

    def remove_legacy_secret(self) -> bool:
        """Delete the previously used secret; failures are logged only."""
        if not self.legacy_secret_name or self.legacy_secret_name == self.secret_name:
            return False

        try:
            result = run(
                [SECRET_STORE_CLI, "secret", "delete", self.legacy_secret_name],
                capture_output=True,
                check=False,
            )
        except Exception as e:
            logger.warning("Could not remove legacy secret", secret=self.legacy_secret_name, error=str(e))
            return False

        if result.returncode != 0:
            logger.debug("Legacy secret not removed", secret=self.legacy_secret_name, returncode=result.returncode)
            return False

        logger.info("🗑️ Legacy secret removed", secret=self.legacy_secret_name)
        return True


def print_key_for_manual_setup(secret_name: str, private_key_b64: str) -> None:
    """Show the operator how to register the secret by hand."""
    perr(f"❌ Could not register secret {secret_name} automatically.")
    perr(f"💡 Add {secret_name} manually in the repository settings (Settings > Secrets).")
    pout(f"📋 Base64 private key for {secret_name} (single line):")
    pout(private_key_b64)


# 🧩📦🔚
