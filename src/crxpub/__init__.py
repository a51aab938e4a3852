#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""crxpub core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from crxpub.exceptions import CrxPubError, VersionMismatchError
from crxpub.package import (
    build_crx,
    generate_keys,
    generate_update_xml,
    verify_package,
)

__version__ = get_version("crxpub", caller_file=__file__)

__all__ = [
    "CrxPubError",
    "VersionMismatchError",
    "__version__",
    "build_crx",
    "generate_keys",
    "generate_update_xml",
    "verify_package",
]

# 🧩📦🔚
