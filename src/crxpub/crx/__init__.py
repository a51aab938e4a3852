#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""CRX packaging: zip payload, header layout, signing and verification."""

from crxpub.crx.builder import BuildResult, CrxBuilder
from crxpub.crx.header import CrxHeader
from crxpub.crx.reader import CrxFile, parse_crx, read_crx, verify_crx

__all__ = [
    "BuildResult",
    "CrxBuilder",
    "CrxFile",
    "CrxHeader",
    "parse_crx",
    "read_crx",
    "verify_crx",
]

# 🧩📦🔚
