#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""update.xml and status page generation."""

from crxpub.update.generator import UpdateXmlGenerator, UpdateXmlResult
from crxpub.update.template import render_template

__all__ = [
    "UpdateXmlGenerator",
    "UpdateXmlResult",
    "render_template",
]

# 🧩📦🔚
