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
"""CORS configuration value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Method(StrEnum):
    """HTTP methods that may be listed in ``Access-Control-Allow-Methods``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, name: str) -> Method | None:
        """Case-insensitive lookup; ``None`` when *name* is not a known method."""
        return _METHODS_BY_NAME.get(name.lower())


_METHODS_BY_NAME: dict[str, Method] = {m.value.lower(): m for m in Method}


@dataclass(frozen=True)
class ReflectRequest:
    """Derive the header value from the incoming request."""

    def __repr__(self) -> str:
        return "ReflectRequest"


REFLECT_REQUEST = ReflectRequest()


@dataclass(frozen=True)
class Exactly:
    """Use a fixed list of values."""

    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


Reflectable = ReflectRequest | Exactly


@dataclass(frozen=True)
class CorsConfig:
    """Immutable CORS settings applied by :func:`flycors.cors.middleware.cors`.

    Defaults produce no headers at all. Sequences are stored as tuples so two
    configs with the same settings compare (and hash) equal.
    """

    origin: Reflectable = field(default_factory=Exactly)
    expose: tuple[str, ...] = ()
    max_age: int = 0  # seconds
    credentials: bool = False
    methods: tuple[Method, ...] = ()
    headers: Reflectable = field(default_factory=Exactly)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expose", tuple(self.expose))
        object.__setattr__(self, "methods", tuple(self.methods))
