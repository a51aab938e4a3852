#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for crxpub configuration."""

from __future__ import annotations

# =================================
# Directory layout defaults
# =================================
DEFAULT_ROOT_DIR = "."  # Extension source root (holds manifest.json)
DEFAULT_DEPLOY_DIR = "deploy"  # key-info.json and templates/
DEFAULT_PUBLISH_DIR = "docs"  # Served by the static file host

# =================================
# File names
# =================================
MANIFEST_FILE = "manifest.json"
KEY_INFO_FILE = "key-info.json"
UPDATE_XML_FILE = "update.xml"
STATUS_PAGE_FILE = "index.html"
TEMPLATES_DIR = "templates"
UPDATE_XML_TEMPLATE_FILE = "update.xml.template"
CRX_SUFFIX = ".crx"

# =================================
# Distribution channel defaults
# =================================
DEFAULT_BASE_URL = "https://reyfafa.github.io/ShoppyDelight"
DEFAULT_ARTIFACT_PREFIX = "shoppy-extension"
DEFAULT_EXTENSION_NAME = "Shoppy Extension"

# Files bundled next to manifest.json. Missing files are skipped with a
# warning unless strict mode is enabled.
DEFAULT_INCLUDE_FILES = (
    "background.js",
    "bulk-translator.js",
    "gpt-option-translate.js",
    "popup.html",
    "popup.js",
    "options.html",
    "settings.js",
    "styles.css",
    "icon16.png",
    "icon48.png",
    "icon128.png",
)

# =================================
# Manifest fields
# =================================
MANIFEST_UPDATE_URL_FIELD = "update_url"
MANIFEST_KEY_FIELD = "key"
MANIFEST_VERSION_FIELD = "version"

# Stripped from the manifest packed inside the CRX
DISTRIBUTION_ONLY_FIELDS = (MANIFEST_UPDATE_URL_FIELD,)

# =================================
# Secret store defaults
# =================================
DEFAULT_SECRET_NAME = "CRX_KEY_BASE64"
DEFAULT_LEGACY_SECRET_NAME = "CRX_PRIVATE_KEY_PEM"
SECRET_STORE_CLI = "gh"

# =================================
# Environment variables read by the commands
# =================================
ENV_RELEASE_VERSION = "RELEASE_VERSION"
ENV_PRIVATE_KEY_PEM = "CRX_PRIVATE_KEY_PEM"
ENV_PRIVATE_KEY_BASE64 = "CRX_KEY_BASE64"

# =================================
# Key defaults
# =================================
RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
PEM_LINE_LENGTH = 64


# 🧩📦🔚
