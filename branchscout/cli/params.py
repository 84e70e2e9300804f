"""
Click parameter types for branchscout.
"""

from __future__ import annotations

from typing import Any

import click

from ..core.models.branch import LocalSource, RemoteSource, parse_source


class SourceParamType(click.ParamType):
    """A branch source given in its raw form: ``local`` or ``remote <name> <url>``."""

    name = "source"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> LocalSource | RemoteSource:
        if isinstance(value, (LocalSource, RemoteSource)):
            return value
        source = parse_source(value)
        if source is None:
            self.fail(
                f"{value!r} is not a branch source "
                "(expected 'local' or 'remote <name> <url>')",
                param,
                ctx,
            )
        return source


SOURCE = SourceParamType()
