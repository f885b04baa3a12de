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
"""Starlette application factory with CORS wired in."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import BaseRoute

from flycors.cors.types import CorsConfig
from flycors.web.adapters.starlette.cors_middleware import CorsMiddleware

logger = logging.getLogger(__name__)


def create_app(
    routes: Sequence[BaseRoute] = (),
    cors: CorsConfig | None = None,
    cors_paths: Sequence[str] = (),
    cors_exclude_paths: Sequence[str] = (),
    debug: bool = False,
    **kwargs: Any,
) -> Starlette:
    """Build a Starlette app whose responses carry CORS headers.

    Args:
        routes: Application routes.
        cors: CORS settings; ``None`` adds no CORS middleware.
        cors_paths: Glob patterns limiting which paths get CORS headers.
        cors_exclude_paths: Glob patterns of paths that never get them.
        debug: Starlette debug mode.
        **kwargs: Passed through to :class:`~starlette.applications.Starlette`.
    """
    middleware: list[Middleware] = []
    if cors is not None:
        middleware.append(
            Middleware(
                CorsMiddleware,
                config=cors,
                url_patterns=cors_paths,
                exclude_patterns=cors_exclude_paths,
            )
        )
        logger.info("CORS enabled: %r", cors)

    return Starlette(debug=debug, routes=list(routes), middleware=middleware, **kwargs)
