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
"""CORS configuration decoding and header computation."""

from flycors.cors.context import CorsContext
from flycors.cors.decoder import (
    decode_config,
    decode_config_json,
    decode_methods,
    decode_positive_int,
    decode_reflectable,
    decode_string_list,
    decode_truthy,
)
from flycors.cors.middleware import (
    allow_credentials,
    allow_headers,
    allow_methods,
    allow_origin,
    cors,
    cors_headers,
    expose_headers,
    max_age,
    pipeline,
    stage,
)
from flycors.cors.types import REFLECT_REQUEST, CorsConfig, Exactly, Method, Reflectable, ReflectRequest

__all__ = [
    # Types
    "CorsConfig",
    "CorsContext",
    "Exactly",
    "Method",
    "REFLECT_REQUEST",
    "Reflectable",
    "ReflectRequest",
    # Decoder
    "decode_config",
    "decode_config_json",
    "decode_methods",
    "decode_positive_int",
    "decode_reflectable",
    "decode_string_list",
    "decode_truthy",
    # Middleware
    "allow_credentials",
    "allow_headers",
    "allow_methods",
    "allow_origin",
    "cors",
    "cors_headers",
    "expose_headers",
    "max_age",
    "pipeline",
    "stage",
]
