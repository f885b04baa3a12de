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
"""Decode untyped configuration input into a :class:`CorsConfig`.

The input is whatever a JSON, YAML or TOML parser (or the environment)
produced: a mapping with the optional keys ``origin``, ``expose``,
``maxAge``, ``credentials``, ``methods`` and ``headers``. Missing keys and
``null`` values fall back to the :class:`CorsConfig` defaults; unknown keys
are ignored. Any malformed field fails the whole decode with a
:class:`~flycors.kernel.exceptions.DecodeError`.

String-list fields accept either a list of strings or a single
comma-separated string; ``"a,b"`` and ``["a", "b"]`` decode identically.
Entries are never trimmed.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from flycors.cors.types import REFLECT_REQUEST, CorsConfig, Exactly, Method, Reflectable
from flycors.kernel.exceptions import DecodeError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")

# Input key -> CorsConfig attribute
FIELD_NAMES: dict[str, str] = {
    "origin": "origin",
    "expose": "expose",
    "maxAge": "max_age",
    "credentials": "credentials",
    "methods": "methods",
    "headers": "headers",
}


def decode_string_list(value: Any, field: str | None = None) -> list[str]:
    """Accept a list of strings, or a single string split on ``","``."""
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise DecodeError("expected a list of strings", field, value)
        return list(value)
    raise DecodeError("expected a string or a list of strings", field, value)


def decode_reflectable(value: Any, field: str | None = None) -> Reflectable:
    """``"*"`` (or ``["*"]``) reflects the request; anything else is a fixed list."""
    values = decode_string_list(value, field)
    if values == ["*"]:
        return REFLECT_REQUEST
    return Exactly(tuple(values))


def decode_methods(value: Any, field: str | None = "methods") -> tuple[Method, ...]:
    """Case-insensitive method names; one unknown entry fails the whole list."""
    names = decode_string_list(value, field)
    parsed = [Method.parse(name.lower()) for name in names]
    unknown = [name for name, method in zip(names, parsed) if method is None]
    if unknown:
        raise DecodeError(f"unrecognized methods: {','.join(unknown)}", field, value)
    return tuple(m for m in parsed if m is not None)


def decode_positive_int(value: Any, field: str | None = "maxAge") -> int:
    """A non-negative integer, given as a number or a decimal string."""
    if isinstance(value, bool):
        raise DecodeError("expected an integer", field, value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _INT_RE.fullmatch(value):
        number = int(value)
    else:
        raise DecodeError("expected an integer", field, value)

    if number < 0:
        raise DecodeError("must not be negative", field, value)
    return number


def decode_truthy(value: Any, field: str | None = "credentials") -> bool:
    """Booleans as is, non-zero integers and non-empty strings as ``True``.

    Any non-empty string counts, including ``"0"`` and ``"false"``.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value != ""
    raise DecodeError("expected a boolean, integer or string", field, value)


_FIELD_DECODERS: dict[str, Callable[[Any, str], Any]] = {
    "origin": decode_reflectable,
    "expose": lambda value, field: tuple(decode_string_list(value, field)),
    "maxAge": decode_positive_int,
    "credentials": decode_truthy,
    "methods": decode_methods,
    "headers": decode_reflectable,
}


def decode_config(value: Any) -> CorsConfig:
    """Decode a mapping into a :class:`CorsConfig`.

    Raises:
        DecodeError: if *value* is not a mapping or any field is malformed.
    """
    if not isinstance(value, Mapping):
        raise DecodeError("expected an object", None, value)

    kwargs: dict[str, Any] = {}
    try:
        for key, decoder in _FIELD_DECODERS.items():
            raw = value.get(key)
            if raw is not None:
                kwargs[FIELD_NAMES[key]] = decoder(raw, key)
    except DecodeError as exc:
        logger.warning("CORS configuration rejected: %s", exc)
        raise

    config = CorsConfig(**kwargs)
    logger.debug("Decoded CORS configuration: %r", config)
    return config


def decode_config_json(text: str | bytes) -> CorsConfig:
    """Parse a JSON document and decode it with :func:`decode_config`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc.msg}", None, text) from exc
    return decode_config(data)
