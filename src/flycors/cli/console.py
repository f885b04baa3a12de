# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from flycors.cors.types import CorsConfig, ReflectRequest, Reflectable

FLYCORS_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "dim": "dim",
})

console = Console(theme=FLYCORS_THEME)


def _describe(value: Reflectable) -> str:
    if isinstance(value, ReflectRequest):
        return "reflect request"
    return escape(",".join(value.values)) or "[dim](none)[/dim]"


def config_table(config: CorsConfig) -> Table:
    """Render a decoded config as a two-column table."""
    table = Table(title="CORS configuration", show_header=False, border_style="dim")
    table.add_column("Field", style="info")
    table.add_column("Value")
    table.add_row("origin", _describe(config.origin))
    table.add_row("expose", escape(",".join(config.expose)) or "[dim](none)[/dim]")
    table.add_row("maxAge", str(config.max_age))
    table.add_row("credentials", str(config.credentials).lower())
    table.add_row("methods", ",".join(m.value for m in config.methods) or "[dim](none)[/dim]")
    table.add_row("headers", _describe(config.headers))
    return table


def headers_table(headers: list[tuple[str, str]]) -> Table:
    table = Table(title="Response headers", border_style="dim")
    table.add_column("Header", style="info")
    table.add_column("Value")
    for name, value in headers:
        table.add_row(name, escape(value))
    return table
