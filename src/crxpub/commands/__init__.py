#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the crxpub CLI."""

from __future__ import annotations

from crxpub.commands.build import build_command
from crxpub.commands.keygen import keygen_command
from crxpub.commands.update_xml import update_xml_command
from crxpub.commands.verify import verify_command

__all__ = [
    "build_command",
    "keygen_command",
    "update_xml_command",
    "verify_command",
]

# 🧩📦🔚
