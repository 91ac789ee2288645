"""
Tests for configuration, formatting helpers and the CLI

Tests covering:
1. Environment-driven configuration
2. Date and timestamp display formats
3. sample / generate commands
"""

import json
import pytest
from datetime import date, datetime

from reporting.cli import main
from utils import Config, format_date_display, format_timestamp


# =============================================================================
# Config
# =============================================================================


class TestConfig:
    """Config reads environment variables with defaults."""

    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "DEBUG", "ALLOWED_ORIGINS", "DEFAULT_VARIANT"):
            monkeypatch.delenv(name, raising=False)
        config = Config.load()

        assert config.port == 8000
        assert config.debug is False
        assert config.allowed_origins == []
        assert config.default_variant == "comprehensive"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "9100")
        monkeypatch.setenv("DEBUG", "TRUE")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,,")
        config = Config.load()

        assert config.port == 9100
        assert config.debug is True
        assert config.allowed_origins == ["https://a.example", "https://b.example"]
        assert config.to_dict()["port"] == 9100


class TestFormatting:

    def test_date_display(self):
        assert format_date_display(date(1997, 3, 5)) == "05 Mar 1997"

    def test_timestamp(self):
        assert format_timestamp(datetime(2024, 6, 1, 9, 5)) == "01 Jun 2024, 09:05"


# =============================================================================
# CLI
# =============================================================================


class TestCli:
    """reporting.cli commands."""

    def test_sample(self, tmp_path, capsys):
        code = main([
            "sample",
            "--variant", "minimal",
            "--renderer", "imperative",
            "--output-dir", str(tmp_path),
        ])

        assert code == 0
        output_path = tmp_path / "Amina_Rahman-minimal.pdf"
        assert output_path.read_bytes().startswith(b"%PDF")
        assert "Renderer: imperative" in capsys.readouterr().out

    def test_generate(self, tmp_path):
        input_path = tmp_path / "biodata.json"
        input_path.write_text(json.dumps({"fullName": "Yusuf Ali", "gender": "male"}))

        code = main(["generate", str(input_path), "--output-dir", str(tmp_path / "out")])

        assert code == 0
        assert (tmp_path / "out" / "Yusuf_Ali-comprehensive.pdf").exists()

    def test_generate_missing_file(self, tmp_path, capsys):
        code = main(["generate", str(tmp_path / "nope.json")])
        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_generate_invalid_record(self, tmp_path, capsys):
        input_path = tmp_path / "biodata.json"
        input_path.write_text(json.dumps({"fullName": "Yusuf Ali"}))

        code = main(["generate", str(input_path), "--output-dir", str(tmp_path)])

        assert code == 1
        assert "Missing required field: gender" in capsys.readouterr().err

    def test_unknown_variant_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["sample", "--variant", "full", "--output-dir", str(tmp_path)])
