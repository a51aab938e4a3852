#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Building the zip payload of a CRX."""

from __future__ import annotations

from collections.abc import Iterable
import io
from pathlib import Path
from typing import Any
import zipfile

from attrs import frozen
from provide.foundation import logger
from provide.foundation.formatting import format_size

from crxpub.config.defaults import MANIFEST_FILE
from crxpub.crx.constants import ZIP_COMPRESSION_LEVEL
from crxpub.exceptions import MissingSourceFileError
from crxpub.manifest import serialize_manifest


@frozen
class Payload:
    """Zip bytes plus what went into them."""

    data: bytes
    included: tuple[str, ...]
    missing: tuple[str, ...]


def create_payload(
    root_dir: Path,
    manifest: dict[str, Any],
    include_files: Iterable[str],
    strict: bool = False,
) -> Payload:
    """Zip the packaged manifest and the listed extension files.

    Args:
        root_dir: Extension source directory
        manifest: Manifest to pack (already stripped of distribution fields)
        include_files: Paths relative to ``root_dir``
        strict: Raise instead of warning when a listed file is missing

    Raises:
        MissingSourceFileError: In strict mode, for the first missing file.
    """
    included: list[str] = [MANIFEST_FILE]
    missing: list[str] = []
    buffer = io.BytesIO()

    with zipfile.ZipFile(
        buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=ZIP_COMPRESSION_LEVEL
    ) as archive:
        archive.writestr(MANIFEST_FILE, serialize_manifest(manifest))

        for name in include_files:
            if name == MANIFEST_FILE:
                continue
            file_path = root_dir / name
            if not file_path.is_file():
                if strict:
                    raise MissingSourceFileError(f"Included file not found: {name}")
                logger.warning("⚠️ File not found, skipping", file=name)
                missing.append(name)
                continue
            archive.write(file_path, arcname=name)
            included.append(name)

    data = buffer.getvalue()
    logger.info(
        "✅ ZIP payload created",
        size=format_size(len(data)),
        files=len(included),
        missing=len(missing),
    )
    return Payload(data=data, included=tuple(included), missing=tuple(missing))


# 🧩📦🔚
