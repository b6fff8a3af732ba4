#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the Foundation-based runtime configuration."""

from __future__ import annotations

import os
from unittest.mock import Mock, patch

import attrs
from click.testing import CliRunner
import pytest

from filexor.cli import main as cli_main
from filexor.config import FileXorRuntimeConfig, parse_log_level, parse_suffix
from filexor.config.defaults import DEFAULT_DECRYPT_SUFFIX, DEFAULT_ENCRYPT_SUFFIX, DEFAULT_LOG_LEVEL


class TestFileXorRuntimeConfig:
    """Test runtime configuration."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = FileXorRuntimeConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.encrypt_suffix == DEFAULT_ENCRYPT_SUFFIX == ".enc"
        assert config.decrypt_suffix == DEFAULT_DECRYPT_SUFFIX == ".dec"

    @patch.dict(
        os.environ,
        {
            "FILEXOR_LOG_LEVEL": "debug",
            "FILEXOR_ENCRYPT_SUFFIX": ".xor",
            "FILEXOR_DECRYPT_SUFFIX": ".plain",
        },
    )
    def test_from_env(self) -> None:
        """Test values loaded from environment variables."""
        config = FileXorRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.encrypt_suffix == ".xor"
        assert config.decrypt_suffix == ".plain"

    def test_invalid_log_level(self) -> None:
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            FileXorRuntimeConfig(log_level="chatty")

    def test_suffix_for(self) -> None:
        """Test suffix lookup by action name."""
        config = FileXorRuntimeConfig(encrypt_suffix=".a", decrypt_suffix=".b")
        assert config.suffix_for("encrypt") == ".a"
        assert config.suffix_for("decrypt") == ".b"

    def test_every_field_is_consumed(self) -> None:
        """Only settings the CLI actually reads are declared."""
        names = set(attrs.fields_dict(FileXorRuntimeConfig))
        assert {"log_level", "encrypt_suffix", "decrypt_suffix"} <= names
        assert "setup_log_level" not in names

    @patch.dict(os.environ, {"FILEXOR_LOG_LEVEL": "debug"})
    @patch("filexor.cli.get_hub")
    def test_log_level_reaches_telemetry(self, mock_get_hub: Mock) -> None:
        """FILEXOR_LOG_LEVEL becomes the default level Foundation is initialized with."""
        runner = CliRunner()
        result = runner.invoke(cli_main, ["interactive"], input="4\n")

        assert result.exit_code == 0, result.output
        telemetry = mock_get_hub.return_value.initialize_foundation.call_args.args[0]
        assert telemetry.service_name == "filexor"
        assert telemetry.logging.default_level == "DEBUG"


class TestParsers:
    """Test field converters."""

    @pytest.mark.parametrize("value", ["info", " INFO ", "Info"])
    def test_parse_log_level_normalizes(self, value: str) -> None:
        assert parse_log_level(value) == "INFO"

    def test_parse_suffix_rejects_blank(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            parse_suffix("  ")

    def test_parse_suffix_strips(self) -> None:
        assert parse_suffix(" .enc ") == ".enc"


# 🌶️📦🔚
