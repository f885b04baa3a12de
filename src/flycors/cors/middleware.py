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
"""CORS header functions.

Every function takes its parameter and a :class:`CorsContext` and returns a
new context with at most one header appended. They never fail and never
look at anything but the ``origin`` and ``access-control-request-headers``
request headers.

Functions compose left to right::

    run = pipeline(
        stage(allow_origin, REFLECT_REQUEST),
        stage(allow_methods, [Method.GET]),
    )
    ctx = run(CorsContext(request_headers={"origin": "https://a.example"}))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from functools import partial, reduce
from typing import Any

from flycors.cors.context import CorsContext
from flycors.cors.types import CorsConfig, Method, Reflectable, ReflectRequest

ALLOW_ORIGIN = "access-control-allow-origin"
EXPOSE_HEADERS = "access-control-expose-headers"
MAX_AGE = "access-control-max-age"
ALLOW_CREDENTIALS = "access-control-allow-credentials"
ALLOW_METHODS = "access-control-allow-methods"
ALLOW_HEADERS = "access-control-allow-headers"

REQUEST_ORIGIN = "origin"
REQUEST_HEADERS = "access-control-request-headers"

Stage = Callable[[CorsContext], CorsContext]


def _set_list(name: str, values: Sequence[str], ctx: CorsContext) -> CorsContext:
    if not values:
        return ctx
    return ctx.with_header(name, ",".join(values))


def allow_origin(origin: Reflectable, ctx: CorsContext) -> CorsContext:
    """Reflect the request origin (``*`` when absent) or list fixed origins."""
    if isinstance(origin, ReflectRequest):
        requested = ctx.request_header(REQUEST_ORIGIN)
        return ctx.with_header(ALLOW_ORIGIN, "*" if requested is None else requested)
    return _set_list(ALLOW_ORIGIN, origin.values, ctx)


def expose_headers(headers: Sequence[str], ctx: CorsContext) -> CorsContext:
    return _set_list(EXPOSE_HEADERS, headers, ctx)


def max_age(seconds: int, ctx: CorsContext) -> CorsContext:
    if seconds <= 0:
        return ctx
    return ctx.with_header(MAX_AGE, str(seconds))


def allow_credentials(credentials: bool, ctx: CorsContext) -> CorsContext:
    # never sent as "false"
    if not credentials:
        return ctx
    return ctx.with_header(ALLOW_CREDENTIALS, "true")


def allow_methods(methods: Sequence[Method], ctx: CorsContext) -> CorsContext:
    """List methods in the order given; duplicates are kept."""
    return _set_list(ALLOW_METHODS, [m.value for m in methods], ctx)


def allow_headers(headers: Reflectable, ctx: CorsContext) -> CorsContext:
    """Reflect ``Access-Control-Request-Headers`` or list fixed headers.

    Unlike :func:`allow_origin`, reflecting with no request header present
    adds nothing rather than falling back to ``*``.
    """
    if isinstance(headers, ReflectRequest):
        requested = ctx.request_header(REQUEST_HEADERS)
        if requested is None:
            return ctx
        return ctx.with_header(ALLOW_HEADERS, requested)
    return _set_list(ALLOW_HEADERS, headers.values, ctx)


def stage(fn: Callable[[Any, CorsContext], CorsContext], parameter: Any) -> Stage:
    """Bind *parameter* to a header function, leaving a ``ctx -> ctx`` stage."""
    return partial(fn, parameter)


def pipeline(*stages: Stage) -> Stage:
    """Compose stages so that they run in the order given."""

    def run(ctx: CorsContext) -> CorsContext:
        return reduce(lambda acc, step: step(acc), stages, ctx)

    return run


def cors(config: CorsConfig, ctx: CorsContext) -> CorsContext:
    """Apply every CORS header described by *config*."""
    return pipeline(
        stage(allow_origin, config.origin),
        stage(expose_headers, config.expose),
        stage(max_age, config.max_age),
        stage(allow_credentials, config.credentials),
        stage(allow_methods, config.methods),
        stage(allow_headers, config.headers),
    )(ctx)


def cors_headers(config: CorsConfig, request_headers: Mapping[str, str] | None = None) -> list[tuple[str, str]]:
    """Headers :func:`cors` would add for a request carrying *request_headers*."""
    return list(cors(config, CorsContext(request_headers=request_headers or {})).response_headers)
