#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Arguments and context helpers shared by the crxpub commands."""

from __future__ import annotations

from collections.abc import Callable
import os
from typing import Any, TypeVar

import click

from crxpub.config import ChannelConfig
from crxpub.config.defaults import ENV_RELEASE_VERSION
from crxpub.manifest import is_valid_version

F = TypeVar("F", bound=Callable[..., Any])


def _check_version(ctx: click.Context, param: click.Parameter, value: str | None) -> str:
    # RELEASE_VERSION wins over the positional argument
    value = os.environ.get(ENV_RELEASE_VERSION) or value
    if not value:
        raise click.BadParameter(
            f"No version given. Pass it as the first argument or set {ENV_RELEASE_VERSION}, e.g. "
            f"{ENV_RELEASE_VERSION}=1.6.2",
            ctx=ctx,
            param=param,
        )
    value = value.strip()
    if not is_valid_version(value):
        raise click.BadParameter(f"'{value}' is not a dotted numeric version such as 1.6.2", ctx=ctx, param=param)
    return value


def version_argument(func: F) -> F:
    """VERSION from $RELEASE_VERSION, or the positional argument when it is unset."""
    return click.argument(
        "version",
        required=False,
        envvar=ENV_RELEASE_VERSION,
        callback=_check_version,
    )(func)


def get_channel_config(ctx: click.Context) -> ChannelConfig:
    """Channel config stored by the ``crxpub`` group, or loaded from the environment.

    Standalone entry points (crxpub-build, ...) run without the group.
    """
    obj = ctx.find_object(dict)
    if obj is not None and isinstance(obj.get("channel_config"), ChannelConfig):
        return obj["channel_config"]
    return ChannelConfig.from_env()


# 🧩📦🔚
