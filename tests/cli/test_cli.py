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
"""Tests for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from pycors.cli.main import cli
from pycors.logging.structlog_adapter import PACKAGE_LOGGER

CONFIG = """\
pycors:
  cors:
    default: api
    profiles:
      api:
        allowedOrigins: ["http://bar.com"]
        allowedMethods: [GET, POST]
        allowedHeaders: [Content-Type]
        maxAge: 600
"""


@pytest.fixture(autouse=True)
def _detach_cli_logging():
    """Commands log to the runner's stderr, which is closed after each invoke."""
    yield
    package = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package.handlers):
        package.removeHandler(handler)
    package.setLevel(logging.NOTSET)
    package.propagate = True
    structlog.reset_defaults()


def _config(tmp_path: Path) -> str:
    path = tmp_path / "cors.yaml"
    path.write_text(CONFIG)
    return str(path)


class TestCLI:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CORS policy engine" in result.output
        assert "check" in result.output
        assert "profiles" in result.output


class TestProfilesCommand:
    def test_lists_packaged_profiles(self):
        result = CliRunner().invoke(cli, ["profiles"])
        assert result.exit_code == 0, result.output
        assert "open" in result.output
        assert "disabled" in result.output
        assert "(default)" in result.output

    def test_lists_configured_profiles(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["profiles", "--config", _config(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "api" in result.output

    def test_missing_config_file(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["profiles", "--config", str(tmp_path / "absent.yaml")])
        assert result.exit_code == 2


class TestCheckCommand:
    def test_allowed_preflight(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli,
            ["check", "--origin", "http://bar.com", "--method", "POST", "--config", _config(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert "allowed" in result.output
        assert "status 204" in result.output

    def test_rejected_preflight(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli,
            ["check", "--origin", "http://evil.com", "--config", _config(tmp_path)],
        )
        assert result.exit_code == 1
        assert "rejected" in result.output

    def test_rejected_request_headers(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli,
            [
                "check",
                "--origin", "http://bar.com",
                "--method", "POST",
                "--request-headers", "X-Secret",
                "--config", _config(tmp_path),
            ],
        )
        assert result.exit_code == 1

    def test_actual_request_rejected_by_method(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli,
            ["check", "--actual", "--origin", "http://bar.com", "--method", "DELETE", "--config", _config(tmp_path)],
        )
        assert result.exit_code == 1
        assert "status 405" in result.output

    def test_actual_request_allowed(self):
        result = CliRunner().invoke(cli, ["check", "--actual", "--origin", "http://bar.com"])
        assert result.exit_code == 0, result.output
        assert "status 200" in result.output

    def test_same_origin(self):
        result = CliRunner().invoke(cli, ["check", "--origin", "http://localhost"])
        assert result.exit_code == 0
        assert "Not a CORS request" in result.output

    def test_unknown_profile(self):
        result = CliRunner().invoke(cli, ["check", "--origin", "http://bar.com", "--profile", "missing"])
        assert result.exit_code == 2
        assert "CORS profile [missing] not found." in result.output
