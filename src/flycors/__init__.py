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
"""flycors — CORS response headers for HTTP request/response pipelines."""

from flycors.cors import (
    REFLECT_REQUEST,
    CorsConfig,
    CorsContext,
    Exactly,
    Method,
    Reflectable,
    ReflectRequest,
    allow_credentials,
    allow_headers,
    allow_methods,
    allow_origin,
    cors,
    cors_headers,
    decode_config,
    decode_config_json,
    expose_headers,
    max_age,
    pipeline,
    stage,
)
from flycors.kernel.exceptions import DecodeError, FlyCorsException

__version__ = "0.1.0"

__all__ = [
    "CorsConfig",
    "CorsContext",
    "DecodeError",
    "Exactly",
    "FlyCorsException",
    "Method",
    "REFLECT_REQUEST",
    "Reflectable",
    "ReflectRequest",
    "__version__",
    "allow_credentials",
    "allow_headers",
    "allow_methods",
    "allow_origin",
    "cors",
    "cors_headers",
    "decode_config",
    "decode_config_json",
    "expose_headers",
    "max_age",
    "pipeline",
    "stage",
]
