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
"""Tests for Config loading and CORS section decoding."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flycors.core.config import Config, load_cors_config
from flycors.cors.types import REFLECT_REQUEST, CorsConfig, Exactly, Method
from flycors.kernel.exceptions import DecodeError


class TestConfigGet:
    def test_dot_notation(self):
        config = Config({"flycors": {"cors": {"maxAge": 600}}})
        assert config.get("flycors.cors.maxAge") == 600

    def test_missing_key_returns_default(self):
        assert Config({}).get("flycors.cors.origin", "x") == "x"

    def test_env_var_overrides(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_CORS_MAXAGE", "30")
        config = Config({"flycors": {"cors": {"maxAge": 600}}})
        assert config.get("flycors.cors.maxAge") == "30"

    def test_env_key_format(self):
        assert Config.env_key("flycors.cors.maxAge") == "FLYCORS_CORS_MAXAGE"
        assert Config.env_key("app.allowed-origins") == "FLYCORS_APP_ALLOWED_ORIGINS"

    def test_placeholder_with_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGIN", raising=False)
        config = Config({"flycors": {"cors": {"origin": "${CORS_ORIGIN:*}"}}})
        assert config.get("flycors.cors.origin") == "*"

    def test_placeholder_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGIN", "a.com")
        config = Config({"flycors": {"cors": {"origin": "${CORS_ORIGIN}"}}})
        assert config.get("flycors.cors.origin") == "a.com"

    def test_unresolvable_placeholder_raises(self, monkeypatch):
        monkeypatch.delenv("NOPE_NOT_SET", raising=False)
        config = Config({"a": "${NOPE_NOT_SET}"})
        with pytest.raises(ValueError):
            config.get("a")

    def test_placeholders_in_list_entries(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGIN", "a.com")
        monkeypatch.delenv("CORS_SECOND", raising=False)
        config = Config({"flycors": {"cors": {"origin": ["${CORS_ORIGIN}", "${CORS_SECOND:b.com}", "c.com"]}}})
        assert config.get("flycors.cors.origin") == ["a.com", "b.com", "c.com"]

    def test_get_section(self):
        config = Config({"flycors": {"cors": {"origin": "*"}}})
        assert config.get_section("flycors.cors") == {"origin": "*"}
        assert config.get_section("flycors.missing") == {}


class TestConfigFromFile:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "flycors.yaml"
        path.write_text("flycors:\n  cors:\n    origin: '*'\n    methods: [get, post]\n")
        config = Config.from_file(path)
        assert config.get_section("flycors.cors") == {"origin": "*", "methods": ["get", "post"]}
        assert config.loaded_sources == [str(path)]

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "flycors.toml"
        path.write_text('[flycors.cors]\nmaxAge = 120\ncredentials = true\n')
        config = Config.from_file(path)
        assert config.get("flycors.cors.maxAge") == 120

    def test_json(self, tmp_path: Path):
        path = tmp_path / "cors.json"
        path.write_text(json.dumps({"flycors": {"cors": {"headers": "*"}}}))
        assert Config.from_file(path).get("flycors.cors.headers") == "*"

    def test_profile_overlay(self, tmp_path: Path):
        (tmp_path / "flycors.yaml").write_text("flycors:\n  cors:\n    origin: a.com\n    maxAge: 60\n")
        (tmp_path / "flycors-prod.yaml").write_text("flycors:\n  cors:\n    origin: b.com\n")
        config = Config.from_file(tmp_path / "flycors.yaml", active_profiles=["prod"])
        assert config.get_section("flycors.cors") == {"origin": "b.com", "maxAge": 60}
        assert len(config.loaded_sources) == 2

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get_section("flycors") == {}
        assert config.loaded_sources == []

    @pytest.mark.parametrize(
        "name, text",
        [
            ("flycors.yaml", "flycors: [unclosed\n"),
            ("flycors.toml", "[flycors.cors\nmaxAge = 1\n"),
            ("cors.json", "{\"flycors\": "),
        ],
    )
    def test_malformed_file_raises_decode_error(self, tmp_path: Path, name, text):
        path = tmp_path / name
        path.write_text(text)
        with pytest.raises(DecodeError) as exc_info:
            Config.from_file(path)
        assert exc_info.value.field is None
        assert exc_info.value.__cause__ is not None

    def test_non_mapping_file_raises_decode_error(self, tmp_path: Path):
        path = tmp_path / "flycors.yaml"
        path.write_text("- origin\n- headers\n")
        with pytest.raises(DecodeError):
            Config.from_file(path)


class TestLoadCorsConfig:
    def test_empty_section_gives_defaults(self):
        assert load_cors_config(Config({})) == CorsConfig()

    def test_decodes_section(self):
        config = Config({"flycors": {"cors": {"origin": "*", "methods": "get,options", "maxAge": 600}}})
        assert load_cors_config(config) == CorsConfig(
            origin=REFLECT_REQUEST,
            methods=(Method.GET, Method.OPTIONS),
            max_age=600,
        )

    def test_env_overrides_fields(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_CORS_ORIGIN", "a.com,b.com")
        monkeypatch.setenv("FLYCORS_CORS_MAXAGE", "300")
        monkeypatch.setenv("FLYCORS_CORS_CREDENTIALS", "false")
        cors = load_cors_config(Config({"flycors": {"cors": {"origin": "*"}}}))
        assert cors.origin == Exactly(("a.com", "b.com"))
        assert cors.max_age == 300
        # any non-empty string enables credentials
        assert cors.credentials is True

    def test_custom_prefix(self):
        config = Config({"app": {"http": {"cors": {"expose": ["x-total"]}}}})
        assert load_cors_config(config, prefix="app.http.cors").expose == ("x-total",)

    def test_invalid_value_raises(self):
        with pytest.raises(DecodeError) as exc_info:
            load_cors_config(Config({"flycors": {"cors": {"maxAge": -1}}}))
        assert exc_info.value.field == "maxAge"

    def test_unresolvable_placeholder_raises_decode_error(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGIN_UNSET", raising=False)
        config = Config({"flycors": {"cors": {"origin": "${CORS_ORIGIN_UNSET}"}}})
        with pytest.raises(DecodeError) as exc_info:
            load_cors_config(config)
        assert exc_info.value.field == "origin"
        assert exc_info.value.value == "${CORS_ORIGIN_UNSET}"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_caller_can_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.delenv("CORS_HEADERS_UNSET", raising=False)
        config = Config({"flycors": {"cors": {"headers": ["${CORS_HEADERS_UNSET}"]}}})
        try:
            cors = load_cors_config(config)
        except DecodeError:
            cors = CorsConfig()
        assert cors == CorsConfig()
