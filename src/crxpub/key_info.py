#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The key-info.json backup record written by keygen."""

from __future__ import annotations

from datetime import UTC, datetime
import json
from pathlib import Path
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir
from provide.foundation.file.formats import read_json

from crxpub.keys import GeneratedKeys, is_valid_extension_id


@frozen
class KeyInfo:
    """Public identity of a distribution channel.

    Never carries private key material.
    """

    extension_id: str
    generated: str
    public_key: str
    chrome_key: str
    update_url: str

    @classmethod
    def from_keys(cls, keys: GeneratedKeys, update_url: str, generated: datetime | None = None) -> KeyInfo:
        timestamp = (generated or datetime.now(UTC)).isoformat().replace("+00:00", "Z")
        return cls(
            extension_id=keys.extension_id,
            generated=timestamp,
            public_key=keys.public_key_pem,
            chrome_key=keys.manifest_key,
            update_url=update_url,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KeyInfo:
        return cls(
            extension_id=_text(data, "extensionId"),
            generated=_text(data, "generated"),
            public_key=_text(data, "publicKey"),
            chrome_key=_text(data, "chromeKey"),
            update_url=_text(data, "updateUrl"),
        )

    def to_dict(self) -> dict[str, Any]:
        # Camel-case keys keep records written by earlier tooling readable
        return {
            "extensionId": self.extension_id,
            "generated": self.generated,
            "publicKey": self.public_key,
            "chromeKey": self.chrome_key,
            "updateUrl": self.update_url,
        }


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    return value if isinstance(value, str) else ""


def save_key_info(path: Path, key_info: KeyInfo) -> Path:
    """Write the backup record as indented JSON."""
    ensure_parent_dir(path)
    atomic_write_text(path, json.dumps(key_info.to_dict(), indent=2))
    logger.info("💾 Key info saved", path=str(path), extension_id=key_info.extension_id)
    return path


def load_key_info(path: Path) -> KeyInfo | None:
    """Read the backup record, or None when it is absent, unreadable or has no valid ID."""
    if not path.is_file():
        return None

    data = read_json(path)
    if not isinstance(data, dict):
        logger.warning("Ignoring malformed key info record", path=str(path))
        return None
    if not is_valid_extension_id(data.get("extensionId")):
        logger.warning("Ignoring key info record without a valid extension ID", path=str(path))
        return None
    return KeyInfo.from_dict(data)


# 🧩📦🔚
