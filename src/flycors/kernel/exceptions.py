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
"""Exception hierarchy for flycors.

All errors raised by the package inherit from FlyCorsException. The header
middleware is total and never raises; only the configuration decoder does.
"""

from __future__ import annotations

from typing import Any


class FlyCorsException(Exception):
    """Base exception for all flycors errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_DECODE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class DecodeError(FlyCorsException):
    """A configuration value has an unrecognised shape or an out-of-range value.

    Carries the offending input key (``None`` when the whole document is at
    fault) and the raw value for diagnostics.
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(
            message,
            code="CORS_DECODE",
            context={"field": field, "value": value},
        )
        self.field = field
        self.value = value

    def __str__(self) -> str:
        reason = super().__str__()
        if self.field is None:
            return reason
        return f"{self.field}: {reason} (got {self.value!r})"
