#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for crxpub tests."""

from __future__ import annotations

from collections.abc import Iterator
import json
from pathlib import Path

from attrs import frozen
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from crxpub.config import ChannelConfig
from crxpub.keys import derive_extension_id, encode_manifest_key, public_key_der

MANIFEST_VERSION = "1.6.2"

EXTENSION_FILES = {
    "background.js": "chrome.runtime.onInstalled.addListener(() => {});\n",
    "popup.html": "<!DOCTYPE html><html><body>popup</body></html>\n",
    "popup.js": "console.log('popup');\n",
    "styles.css": "body { margin: 0; }\n",
}

CHANNEL_ENV_VARS = (
    "RELEASE_VERSION",
    "CRX_PRIVATE_KEY_PEM",
    "CRX_KEY_BASE64",
    "CRXPUB_ROOT_DIR",
    "CRXPUB_DEPLOY_DIR",
    "CRXPUB_PUBLISH_DIR",
    "CRXPUB_BASE_URL",
    "CRXPUB_ARTIFACT_PREFIX",
    "CRXPUB_INCLUDE_FILES",
    "CRXPUB_STRICT_FILES",
    "CRXPUB_SECRET_NAME",
    "CRXPUB_LEGACY_SECRET_NAME",
    "CRXPUB_EXTENSION_NAME",
)


@frozen
class SigningKey:
    """An RSA key in the forms the tests need."""

    private_key: rsa.RSAPrivateKey
    private_key_pem: str
    public_key_der: bytes
    manifest_key: str
    extension_id: str


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests exercising several components end to end")
    config.addinivalue_line("markers", "security: signature and key handling tests")


def make_signing_key() -> SigningKey:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    der = public_key_der(private_key.public_key())
    return SigningKey(
        private_key=private_key,
        private_key_pem=private_pem,
        public_key_der=der,
        manifest_key=encode_manifest_key(der),
        extension_id=derive_extension_id(der),
    )


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    """Session-wide RSA-2048 key; generation is slow."""
    return make_signing_key()


@pytest.fixture(scope="session")
def other_signing_key() -> SigningKey:
    """A second, unrelated key for mismatch tests."""
    return make_signing_key()


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_channel_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's release environment out of the tests."""
    for name in CHANNEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_manifest(path: Path, manifest: dict) -> None:
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")


@pytest.fixture
def extension_dir(tmp_path: Path) -> Path:
    """Extension source directory with manifest.json (version 1.6.2) and a few files."""
    root = tmp_path / "extension"
    root.mkdir()
    write_manifest(
        root / "manifest.json",
        {
            "manifest_version": 3,
            "name": "Test Extension",
            "version": MANIFEST_VERSION,
            "permissions": ["storage"],
        },
    )
    for name, content in EXTENSION_FILES.items():
        (root / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def channel_config(tmp_path: Path, extension_dir: Path) -> ChannelConfig:
    """Channel config rooted in a temporary directory."""
    return ChannelConfig(
        root_dir=str(extension_dir),
        deploy_dir=str(tmp_path / "deploy"),
        publish_dir=str(tmp_path / "docs"),
        base_url="https://example.github.io/channel/",
        artifact_prefix="test-extension",
    )


@pytest.fixture
def committed_channel(channel_config: ChannelConfig, signing_key: SigningKey) -> ChannelConfig:
    """Channel whose manifest.json already carries ``signing_key`` and an update_url."""
    manifest_path = channel_config.manifest_path
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    manifest["update_url"] = channel_config.update_url
    manifest["key"] = signing_key.manifest_key
    write_manifest(manifest_path, manifest)
    return channel_config


# 🧩📦🔚
