#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Human readable index.html for the publish directory."""

from __future__ import annotations

from datetime import UTC, datetime
from html import escape
from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write_text

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name} - Auto Update</title>
    <style>
        body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 50px auto; padding: 20px; }}
        .info {{ background: #f5f5f5; padding: 20px; border-radius: 8px; margin: 20px 0; }}
        .download {{ background: #e8f5e8; padding: 15px; border-radius: 8px; margin: 20px 0; }}
        code {{ background: #f0f0f0; padding: 2px 5px; border-radius: 3px; }}
    </style>
</head>
<body>
    <h1>{name}</h1>

    <div class="info">
        <h3>Extension</h3>
        <ul>
            <li><strong>Current version:</strong> {version}</li>
            <li><strong>Extension ID:</strong> <code>{extension_id}</code></li>
            <li><strong>Update URL:</strong> <code>{update_url}</code></li>
        </ul>
    </div>

    <div class="download">
        <h3>Manual download</h3>
        <p>The browser installs updates automatically. Use this link only for a manual install.</p>
        <a href="{crx_file_name}" download>{crx_file_name}</a>
    </div>

    <div class="info">
        <h3>Automatic updates</h3>
        <ul>
            <li>The browser polls update.xml periodically</li>
            <li>When a newer version is listed it is downloaded and installed</li>
        </ul>
    </div>

    <footer style="margin-top: 40px; text-align: center; color: #666;">
        <p>Generated: {generated}</p>
    </footer>
</body>
</html>
"""


def render_status_page(
    name: str,
    version: str,
    extension_id: str,
    update_url: str,
    crx_file_name: str,
    generated: datetime | None = None,
) -> str:
    timestamp = (generated or datetime.now(UTC)).isoformat()
    return PAGE_TEMPLATE.format(
        name=escape(name),
        version=escape(version),
        extension_id=escape(extension_id),
        update_url=escape(update_url),
        crx_file_name=escape(crx_file_name),
        generated=escape(timestamp),
    )


def write_status_page(path: Path, **values: str) -> Path | None:
    """Write index.html; failures are logged and swallowed."""
    try:
        atomic_write_text(path, render_status_page(**values))
    except Exception as e:
        logger.warning("⚠️ Status page not written", path=str(path), error=str(e))
        return None

    logger.info("📄 Status page written", path=str(path))
    return path


# 🧩📦🔚
