#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""CRX container format constants."""

from __future__ import annotations

import struct

CRX_MAGIC = b"Cr24"
CRX_FORMAT_VERSION = 3
CRX_FORMAT_NAME = "CRX3"

# magic, format version, public key length, signature length
CRX_HEADER_PREFIX = struct.Struct("<4sIII")
CRX_HEADER_PREFIX_SIZE = CRX_HEADER_PREFIX.size  # 16 bytes

ZIP_COMPRESSION_LEVEL = 9

# 🧩📦🔚
