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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatch
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from flycors.cors.context import CorsContext
from flycors.cors.middleware import cors
from flycors.cors.types import CorsConfig


class CorsMiddleware:
    """Appends CORS headers to HTTP responses.

    Headers are computed from the request's ``Origin`` and
    ``Access-Control-Request-Headers`` (first value wins when a header is
    repeated) and appended, never replacing headers the application already
    set. Uses raw ASGI rather than ``BaseHTTPMiddleware`` so streaming
    responses pass through untouched.

    Args:
        app: The downstream ASGI application.
        config: CORS settings; defaults add no headers.
        url_patterns: Glob patterns of request paths to decorate. Empty means
            every path.
        exclude_patterns: Glob patterns of paths to leave alone, checked after
            ``url_patterns``.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: CorsConfig | None = None,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self.app = app
        self._config = config or CorsConfig()
        self._url_patterns = list(url_patterns)
        self._exclude_patterns = list(exclude_patterns)

    def applies_to(self, path: str) -> bool:
        """Whether responses for *path* get CORS headers."""
        if self._url_patterns and not any(fnmatch(path, p) for p in self._url_patterns):
            return False
        return not any(fnmatch(path, p) for p in self._exclude_patterns)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.applies_to(scope.get("path", "")):
            await self.app(scope, receive, send)
            return

        ctx = cors(self._config, CorsContext.from_raw(scope.get("headers", [])))

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in ctx.response_headers:
                    headers.append(name, value)
            await send(message)

        await self.app(scope, receive, send_with_cors)
