#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Placeholder substitution for the update.xml template."""

from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from provide.foundation import logger

BUNDLED_TEMPLATE = "update.xml.template"

PLACEHOLDER_VERSION = "VERSION"
PLACEHOLDER_EXTENSION_ID = "EXTENSION_ID"
PLACEHOLDER_CRX_URL = "CRX_URL"
PLACEHOLDER_CRX_SHA256 = "CRX_SHA256"


def placeholder(name: str) -> str:
    return "{{" + name + "}}"


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Replace every ``{{NAME}}`` occurrence with its value.

    Plain string replacement; values are inserted verbatim and unknown
    placeholders are left untouched.
    """
    rendered = template
    for name, value in values.items():
        rendered = rendered.replace(placeholder(name), value)
    return rendered


def load_template(template_path: Path | None = None) -> str:
    """Read the channel's template, falling back to the bundled one."""
    if template_path is not None and template_path.is_file():
        logger.debug("Using channel update.xml template", path=str(template_path))
        return template_path.read_text(encoding="utf-8")

    logger.debug("Using bundled update.xml template")
    return resources.files("crxpub.update").joinpath("templates", BUNDLED_TEMPLATE).read_text(encoding="utf-8")


# 🧩📦🔚
