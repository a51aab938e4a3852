#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test update/generator.py - update.xml and status page generation."""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from crxpub.config import ChannelConfig
from crxpub.crx import CrxBuilder
from crxpub.exceptions import (
    IdentifierUnavailableError,
    MissingArtifactError,
    VersionMismatchError,
)
from crxpub.key_info import KeyInfo, save_key_info
from crxpub.update import UpdateXmlGenerator

if TYPE_CHECKING:
    from conftest import SigningKey


@pytest.fixture
def built_channel(committed_channel: ChannelConfig, signing_key: SigningKey) -> ChannelConfig:
    CrxBuilder(committed_channel).build(signing_key.private_key_pem, "1.6.2")
    return committed_channel


def fake_artifact(config: ChannelConfig, version: str, data: bytes = b"Cr24 fake") -> None:
    config.publish_path.mkdir(parents=True, exist_ok=True)
    config.crx_path(version).write_bytes(data)


@pytest.mark.integration
class TestUpdateXmlGeneration:
    """Test update.xml rendering after a build."""

    def test_generate_update_xml(self, built_channel: ChannelConfig, signing_key: SigningKey) -> None:
        result = UpdateXmlGenerator(built_channel).generate("1.6.2")
        xml = result.update_xml_path.read_text(encoding="utf-8")

        assert result.update_xml_path == built_channel.publish_path / "update.xml"
        assert result.crx_url == "https://example.github.io/channel/test-extension-1.6.2.crx"
        assert result.extension_id == signing_key.extension_id
        assert f"appid='{signing_key.extension_id}'" in xml
        assert "version='1.6.2'" in xml
        assert f"codebase='{result.crx_url}'" in xml
        assert "{{" not in xml

    def test_update_xml_hash_matches_crx(self, built_channel: ChannelConfig) -> None:
        result = UpdateXmlGenerator(built_channel).generate("1.6.2")
        expected = hashlib.sha256(built_channel.crx_path("1.6.2").read_bytes()).hexdigest()

        assert f"hash_sha256='{expected}'" in result.update_xml_path.read_text(encoding="utf-8")

    def test_status_page_written(self, built_channel: ChannelConfig, signing_key: SigningKey) -> None:
        result = UpdateXmlGenerator(built_channel).generate("1.6.2")

        assert result.status_page_path == built_channel.status_page_path
        page = built_channel.status_page_path.read_text(encoding="utf-8")
        assert signing_key.extension_id in page
        assert "1.6.2" in page
        assert 'href="test-extension-1.6.2.crx"' in page
        assert built_channel.update_url in page

    def test_status_page_disabled(self, built_channel: ChannelConfig) -> None:
        result = UpdateXmlGenerator(built_channel).generate("1.6.2", status_page=False)

        assert result.status_page_path is None
        assert not built_channel.status_page_path.exists()

    def test_status_page_failure_not_fatal(self, built_channel: ChannelConfig) -> None:
        with patch("crxpub.update.status_page.atomic_write_text", side_effect=OSError("disk full")):
            result = UpdateXmlGenerator(built_channel).generate("1.6.2")

        assert result.status_page_path is None
        assert result.update_xml_path.exists()

    def test_channel_template_used(self, built_channel: ChannelConfig) -> None:
        built_channel.template_path.parent.mkdir(parents=True, exist_ok=True)
        built_channel.template_path.write_text("{{EXTENSION_ID}} {{VERSION}} {{CRX_URL}}", encoding="utf-8")

        result = UpdateXmlGenerator(built_channel).generate("1.6.2")

        assert result.update_xml_path.read_text(encoding="utf-8") == (
            f"{result.extension_id} 1.6.2 {result.crx_url}"
        )


@pytest.mark.unit
class TestUpdateXmlPreconditions:
    """Test the checks made before anything is written."""

    def test_version_mismatch(self, built_channel: ChannelConfig) -> None:
        with pytest.raises(VersionMismatchError):
            UpdateXmlGenerator(built_channel).generate("1.6.3")

        assert not built_channel.update_xml_path.exists()

    def test_version_checked_before_artifact(self, committed_channel: ChannelConfig) -> None:
        with pytest.raises(VersionMismatchError):
            UpdateXmlGenerator(committed_channel).generate("9.9.9")

    def test_missing_artifact(self, committed_channel: ChannelConfig) -> None:
        with pytest.raises(MissingArtifactError, match="test-extension-1.6.2.crx"):
            UpdateXmlGenerator(committed_channel).generate("1.6.2")

        assert not committed_channel.update_xml_path.exists()

    def test_empty_artifact(self, committed_channel: ChannelConfig) -> None:
        fake_artifact(committed_channel, "1.6.2", data=b"")

        with pytest.raises(MissingArtifactError):
            UpdateXmlGenerator(committed_channel).generate("1.6.2")


@pytest.mark.unit
class TestExtensionIdResolution:
    """Test where update.xml takes the extension ID from."""

    def test_key_info_preferred(self, committed_channel: ChannelConfig) -> None:
        fake_artifact(committed_channel, "1.6.2")
        save_key_info(
            committed_channel.key_info_path,
            KeyInfo(
                extension_id="p" * 32,
                generated="2025-01-01T00:00:00Z",
                public_key="",
                chrome_key="",
                update_url=committed_channel.update_url,
            ),
        )

        result = UpdateXmlGenerator(committed_channel).generate("1.6.2")

        assert result.extension_id == "p" * 32

    def test_non_string_key_info_id_ignored(self, committed_channel: ChannelConfig, signing_key: SigningKey) -> None:
        fake_artifact(committed_channel, "1.6.2")
        committed_channel.key_info_path.parent.mkdir(parents=True)
        committed_channel.key_info_path.write_text(json.dumps({"extensionId": 123}))

        result = UpdateXmlGenerator(committed_channel).generate("1.6.2")

        assert result.extension_id == signing_key.extension_id
        assert f"appid='{signing_key.extension_id}'" in result.update_xml_path.read_text(encoding="utf-8")

    def test_manifest_key_fallback(self, committed_channel: ChannelConfig, signing_key: SigningKey) -> None:
        fake_artifact(committed_channel, "1.6.2")

        result = UpdateXmlGenerator(committed_channel).generate("1.6.2")

        assert result.extension_id == signing_key.extension_id

    def test_identifier_unavailable(self, channel_config: ChannelConfig) -> None:
        fake_artifact(channel_config, "1.6.2")

        with pytest.raises(IdentifierUnavailableError, match="crxpub keygen"):
            UpdateXmlGenerator(channel_config).generate("1.6.2")

    def test_unusable_manifest_key(self, channel_config: ChannelConfig) -> None:
        fake_artifact(channel_config, "1.6.2")
        manifest = json.loads(channel_config.manifest_path.read_text())
        manifest["key"] = "%%% not base64 %%%"
        channel_config.manifest_path.write_text(json.dumps(manifest))

        with pytest.raises(IdentifierUnavailableError):
            UpdateXmlGenerator(channel_config).generate("1.6.2")


# 🧩📦🔚
