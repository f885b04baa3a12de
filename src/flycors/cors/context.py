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
"""Request/response context the CORS header functions operate on."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _lower_keys(headers: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({name.lower(): value for name, value in headers.items()})


@dataclass(frozen=True)
class CorsContext:
    """Immutable view of a request's headers plus the response headers added so far.

    Response headers form an ordered list of ``(name, value)`` pairs rather
    than a dict: :meth:`with_header` only ever appends, so setting the same
    name twice yields two entries.
    """

    request_headers: Mapping[str, str] = field(default_factory=dict)
    response_headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "request_headers", _lower_keys(self.request_headers))
        object.__setattr__(self, "response_headers", tuple(self.response_headers))

    @classmethod
    def from_raw(cls, raw_headers: Iterable[tuple[bytes, bytes]]) -> CorsContext:
        """Build a context from ASGI-style raw request headers (latin-1 encoded)."""
        headers: dict[str, str] = {}
        for name, value in raw_headers:
            # first occurrence wins, as with Starlette's Headers.get()
            headers.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        return cls(request_headers=headers)

    def request_header(self, name: str) -> str | None:
        return self.request_headers.get(name.lower())

    def with_header(self, name: str, value: str) -> CorsContext:
        """Return a copy of this context with one response header appended."""
        return CorsContext(
            request_headers=self.request_headers,
            response_headers=(*self.response_headers, (name, value)),
        )

    def header(self, name: str) -> str | None:
        """First response value recorded for *name*, or ``None``."""
        for key, value in self.response_headers:
            if key == name:
                return value
        return None

    def header_list(self, name: str) -> list[str]:
        return [value for key, value in self.response_headers if key == name]
