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
"""Tests for Config: loading, env overrides, placeholders and binding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from pycors.core.config import Config, config_properties


class TestConfigAccess:
    def test_get_nested_value(self):
        config = Config({"pycors": {"cors": {"default": "api"}}})
        assert config.get("pycors.cors.default") == "api"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "fallback") == "fallback"

    def test_false_values_are_returned(self):
        config = Config({"pycors": {"cors": {"strict": False}}})
        assert config.get("pycors.cors.strict", True) is False

    def test_get_section(self):
        config = Config({"pycors": {"cors": {"profiles": {"a": {}}}}})
        assert config.get_section("pycors.cors.profiles") == {"a": {}}
        assert config.get_section("pycors.nothing") == {}

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("PYCORS_CORS_DEFAULT", "from-env")
        config = Config({"pycors": {"cors": {"default": "from-file"}}})
        assert config.get("pycors.cors.default") == "from-env"


class TestPlaceholders:
    def test_env_placeholder(self, monkeypatch):
        monkeypatch.setenv("FRONTEND_ORIGIN", "https://app.example.com")
        config = Config({"origin": "${FRONTEND_ORIGIN}"})
        assert config.get("origin") == "https://app.example.com"

    def test_config_reference(self):
        config = Config({"host": "example.com", "origin": "https://${host}"})
        assert config.get("origin") == "https://example.com"

    def test_default_value(self):
        config = Config({"origin": "${UNSET_PYCORS_ORIGIN:http://localhost:3000}"})
        assert config.get("origin") == "http://localhost:3000"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"origin": "${UNSET_PYCORS_ORIGIN}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("origin")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestConfigFiles:
    def test_defaults_ship_open_and_disabled(self):
        config = Config.defaults()
        assert config.get("pycors.cors.default") == "open"
        assert set(config.get_section("pycors.cors.profiles")) == {"open", "disabled"}

    def test_load_yaml_file_merged_with_defaults(self, tmp_path: Path):
        path = tmp_path / "cors.yaml"
        path.write_text(
            "pycors:\n"
            "  cors:\n"
            "    default: api\n"
            "    profiles:\n"
            "      api:\n"
            "        allowedOrigins: ['https://app.example.com']\n"
        )
        config = Config.from_file(path)

        assert config.get("pycors.cors.default") == "api"
        assert set(config.get_section("pycors.cors.profiles")) == {"open", "disabled", "api"}
        assert config.loaded_sources[-1] == str(path)

    def test_load_toml_file(self, tmp_path: Path):
        path = tmp_path / "cors.toml"
        path.write_text('[pycors.cors]\ndefault = "disabled"\n')
        assert Config.from_file(path).get("pycors.cors.default") == "disabled"

    def test_missing_file_yields_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("pycors.cors.default") == "open"

    def test_without_defaults(self, tmp_path: Path):
        path = tmp_path / "cors.yaml"
        path.write_text("pycors:\n  cors:\n    default: api\n")
        config = Config.from_file(path, load_defaults=False)
        assert config.get_section("pycors.cors.profiles") == {}

    def test_sources_with_profile_overlay(self, tmp_path: Path):
        (tmp_path / "pycors.yaml").write_text("pycors:\n  cors:\n    default: open\n")
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "pycors-prod.yaml").write_text("pycors:\n  cors:\n    default: disabled\n")

        config = Config.from_sources(tmp_path, active_profiles=["prod"])

        assert config.get("pycors.cors.default") == "disabled"
        assert any("profile: prod" in source for source in config.loaded_sources)

    def test_pycors_named_file_uses_sources(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "pycors.yaml").write_text("pycors:\n  cors:\n    default: base\n")
        (tmp_path / "pycors.yaml").write_text("pycors:\n  cors:\n    default: root\n")

        config = Config.from_file(tmp_path / "pycors.yaml")
        assert config.get("pycors.cors.default") == "root"


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="pycors.example")
        @dataclass
        class ExampleProperties:
            name: str = "x"
            max_age: int = 0
            enabled: bool = False

        config = Config({"pycors": {"example": {"name": "y", "max_age": "60", "enabled": "yes"}}})
        bound = config.bind(ExampleProperties)

        assert bound.name == "y"
        assert bound.max_age == 60
        assert bound.enabled is True

    def test_bind_uses_defaults(self):
        @config_properties(prefix="pycors.example")
        @dataclass
        class ExampleProperties:
            name: str = "x"

        assert Config({}).bind(ExampleProperties).name == "x"

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            name: str = "x"

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
