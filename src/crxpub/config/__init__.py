#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""crxpub configuration built on the Provide Foundation config stack.

Provides typed, validated configuration models loaded from the environment.
"""

from __future__ import annotations

from crxpub.config.channel import ChannelConfig
from crxpub.config.runtime import CrxPubRuntimeConfig

__all__ = [
    "ChannelConfig",
    "CrxPubRuntimeConfig",
]

# 🧩📦🔚
