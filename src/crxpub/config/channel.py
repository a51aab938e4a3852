#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Distribution channel configuration shared by keygen, build and update-xml.

Every component receives a ``ChannelConfig`` instead of resolving paths on its
own, so the files each stage reads and writes are explicit.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from crxpub.config.defaults import (
    CRX_SUFFIX,
    DEFAULT_ARTIFACT_PREFIX,
    DEFAULT_BASE_URL,
    DEFAULT_DEPLOY_DIR,
    DEFAULT_EXTENSION_NAME,
    DEFAULT_INCLUDE_FILES,
    DEFAULT_LEGACY_SECRET_NAME,
    DEFAULT_PUBLISH_DIR,
    DEFAULT_ROOT_DIR,
    DEFAULT_SECRET_NAME,
    KEY_INFO_FILE,
    MANIFEST_FILE,
    STATUS_PAGE_FILE,
    TEMPLATES_DIR,
    UPDATE_XML_FILE,
    UPDATE_XML_TEMPLATE_FILE,
)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def parse_file_list(value: str | Iterable[str]) -> list[str]:
    """Accept a comma separated string or an iterable of file names."""
    items = value.split(",") if isinstance(value, str) else list(value)
    return [item.strip() for item in items if item and item.strip()]


def parse_flag(value: str | bool) -> bool:
    """Parse boolean flags given either as bools or environment strings."""
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def parse_base_url(value: str) -> str:
    """Drop trailing slashes so URLs can be joined with a single '/'."""
    return value.strip().rstrip("/")


@define
class ChannelConfig(RuntimeConfig):
    """Paths and names for one self-hosted update channel."""

    root_dir: str = field(
        default=DEFAULT_ROOT_DIR,
        env_var="CRXPUB_ROOT_DIR",
        metadata={"help": "Extension source directory containing manifest.json"},
    )
    deploy_dir: str = field(
        default=DEFAULT_DEPLOY_DIR,
        env_var="CRXPUB_DEPLOY_DIR",
        metadata={"help": "Directory holding key-info.json and the update.xml template"},
    )
    publish_dir: str = field(
        default=DEFAULT_PUBLISH_DIR,
        env_var="CRXPUB_PUBLISH_DIR",
        metadata={"help": "Directory served by the static host (CRX, update.xml, index.html)"},
    )
    base_url: str = field(
        default=DEFAULT_BASE_URL,
        env_var="CRXPUB_BASE_URL",
        converter=parse_base_url,
        metadata={"help": "Public URL of the publish directory"},
    )
    artifact_prefix: str = field(
        default=DEFAULT_ARTIFACT_PREFIX,
        env_var="CRXPUB_ARTIFACT_PREFIX",
        metadata={"help": "CRX file name prefix; the version and .crx are appended"},
    )
    extension_name: str = field(
        default=DEFAULT_EXTENSION_NAME,
        env_var="CRXPUB_EXTENSION_NAME",
        metadata={"help": "Display name used on the status page"},
    )
    include_files: list[str] = field(
        factory=lambda: list(DEFAULT_INCLUDE_FILES),
        env_var="CRXPUB_INCLUDE_FILES",
        converter=parse_file_list,
        metadata={"help": "Comma separated files packed next to manifest.json"},
    )
    strict_files: bool = field(
        default=False,
        env_var="CRXPUB_STRICT_FILES",
        converter=parse_flag,
        metadata={"help": "Fail the build when an included file is missing"},
    )
    secret_name: str = field(
        default=DEFAULT_SECRET_NAME,
        env_var="CRXPUB_SECRET_NAME",
        metadata={"help": "Secret receiving the base64 private key"},
    )
    legacy_secret_name: str = field(
        default=DEFAULT_LEGACY_SECRET_NAME,
        env_var="CRXPUB_LEGACY_SECRET_NAME",
        metadata={"help": "Previously used secret removed after publishing"},
    )

    @property
    def root_path(self) -> Path:
        return Path(self.root_dir)

    @property
    def deploy_path(self) -> Path:
        return Path(self.deploy_dir)

    @property
    def publish_path(self) -> Path:
        return Path(self.publish_dir)

    @property
    def manifest_path(self) -> Path:
        return self.root_path / MANIFEST_FILE

    @property
    def key_info_path(self) -> Path:
        return self.deploy_path / KEY_INFO_FILE

    @property
    def template_path(self) -> Path:
        return self.deploy_path / TEMPLATES_DIR / UPDATE_XML_TEMPLATE_FILE

    @property
    def update_xml_path(self) -> Path:
        return self.publish_path / UPDATE_XML_FILE

    @property
    def status_page_path(self) -> Path:
        return self.publish_path / STATUS_PAGE_FILE

    @property
    def update_url(self) -> str:
        """URL of update.xml, written into the source manifest."""
        return f"{self.base_url}/{UPDATE_XML_FILE}"

    def crx_file_name(self, version: str) -> str:
        return f"{self.artifact_prefix}-{version}{CRX_SUFFIX}"

    def crx_path(self, version: str) -> Path:
        return self.publish_path / self.crx_file_name(version)

    def crx_url(self, version: str) -> str:
        return f"{self.base_url}/{self.crx_file_name(version)}"


# 🧩📦🔚
