#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for crxpub."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class CrxPubError(FoundationError):
    """Base exception for all crxpub errors."""

    pass


class ManifestError(CrxPubError):
    """Raised when the extension manifest cannot be read or is malformed."""

    pass


class VersionMismatchError(CrxPubError):
    """Raised when the requested version differs from the manifest version."""

    def __init__(self, manifest_version: str | None, expected_version: str) -> None:
        self.manifest_version = manifest_version
        self.expected_version = expected_version
        super().__init__(
            f"Version mismatch: manifest.json({manifest_version}) != expected({expected_version})"
        )


class MissingArtifactError(CrxPubError):
    """Raised when the CRX for a version has not been built yet."""

    pass


class MissingSourceFileError(CrxPubError):
    """Raised in strict mode when an included extension file is absent."""

    pass


class InvalidKeyFormatError(CrxPubError):
    """Raised when private key text cannot be parsed after normalization."""

    pass


class IdentifierUnavailableError(CrxPubError):
    """Raised when no public key source is available to derive the extension ID."""

    pass


class IdentityMismatchError(CrxPubError):
    """Raised when a signing key does not match the committed extension identity."""

    pass


class ExternalRegistrationError(CrxPubError):
    """Raised when the private key could not be stored in the secret store."""

    pass


class CrxFormatError(CrxPubError):
    """Raised for malformed or unsupported CRX files."""

    pass


# 🧩📦🔚
