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
"""flycors CLI — validate CORS configuration and preview response headers."""

from __future__ import annotations

import click
from rich.markup import escape

from flycors.cli.console import config_table, console, headers_table
from flycors.core.config import CORS_PREFIX, Config, load_cors_config
from flycors.cors.middleware import REQUEST_HEADERS, REQUEST_ORIGIN, cors_headers
from flycors.cors.types import CorsConfig
from flycors.kernel.exceptions import DecodeError
from flycors.logging.structlog_adapter import StructlogAdapter


def _load(config_file: str, profiles: tuple[str, ...], prefix: str) -> tuple[Config, CorsConfig]:
    try:
        config = Config.from_file(config_file, active_profiles=list(profiles))
        if config.get_section("flycors.logging"):
            StructlogAdapter().configure(config)
        return config, load_cors_config(config, prefix=prefix)
    except DecodeError as exc:
        console.print(f"[error]Invalid CORS configuration:[/error] {escape(str(exc))}")
        raise SystemExit(1) from exc


config_argument = click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
profile_option = click.option("--profile", "profiles", multiple=True, help="Profile overlay to merge (repeatable).")
prefix_option = click.option("--prefix", default=CORS_PREFIX, show_default=True, help="Config section holding CORS settings.")


@click.group()
@click.version_option(package_name="flycors")
def cli() -> None:
    """flycors — CORS header middleware tools."""


@cli.command("check")
@config_argument
@profile_option
@prefix_option
def check_command(config_file: str, profiles: tuple[str, ...], prefix: str) -> None:
    """Decode the CORS section of CONFIG_FILE and print the result."""
    config, cors = _load(config_file, profiles, prefix)
    for source in config.loaded_sources:
        console.print(f"[dim]Loaded {escape(source)}[/dim]")
    console.print(config_table(cors))
    console.print("[success]Configuration is valid.[/success]")


@cli.command("headers")
@config_argument
@profile_option
@prefix_option
@click.option("--origin", default=None, help="Origin request header.")
@click.option("--request-headers", default=None, help="Access-Control-Request-Headers request header.")
def headers_command(
    config_file: str,
    profiles: tuple[str, ...],
    prefix: str,
    origin: str | None,
    request_headers: str | None,
) -> None:
    """Show the CORS headers CONFIG_FILE would add to a response."""
    _, config = _load(config_file, profiles, prefix)
    request: dict[str, str] = {}
    if origin is not None:
        request[REQUEST_ORIGIN] = origin
    if request_headers is not None:
        request[REQUEST_HEADERS] = request_headers

    headers = cors_headers(config, request)
    if not headers:
        console.print("[warning]No CORS headers would be added.[/warning]")
        return
    console.print(headers_table(headers))
