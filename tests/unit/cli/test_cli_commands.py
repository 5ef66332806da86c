"""
Unit tests for CLI functionality
"""

import json

from typer.testing import CliRunner

from langsift.cli.main import app
from langsift.cli.utils import options

runner = CliRunner()


def test_version_command():
    """Test version command"""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "langsift" in result.output
    assert "Version" in result.output


def test_help_command():
    """Test help command"""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "detect" in result.output
    assert "profiles" in result.output


class TestDetectCommands:
    """Test detection commands"""

    def test_detect_text_json(self, profile_dir):
        """Test detect text with JSON output"""
        result = runner.invoke(
            app,
            [
                "detect",
                "text",
                "the quick brown fox",
                "--profiles",
                str(profile_dir),
                "--languages",
                "en,de",
                "--json",
            ],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["input"] == "the quick brown fox"
        assert payload["languages"][0]["code"] == "en"

    def test_detect_text_table_with_map(self, profile_dir, tmp_path):
        """Test detect text table output with a code map"""
        code_map = tmp_path / "codes.yaml"
        code_map.write_text("en: eng\n")

        result = runner.invoke(
            app,
            [
                "detect",
                "text",
                "the quick brown fox",
                "-p",
                str(profile_dir),
                "-l",
                "en,de",
                "--map",
                str(code_map),
            ],
        )

        assert result.exit_code == 0
        assert "eng" in result.output

    def test_detect_file_lines(self, profile_dir, tmp_path):
        """Test detecting each line of a file"""
        text_file = tmp_path / "mixed.txt"
        text_file.write_text(
            "the quick brown fox\n\nDer schnelle braune Fuchs springt\n",
            encoding="utf-8",
        )

        result = runner.invoke(
            app,
            [
                "detect",
                "file",
                str(text_file),
                "--lines",
                "-p",
                str(profile_dir),
                "-l",
                "en,de",
                "--json",
            ],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [row["languages"][0]["code"] for row in payload] == ["en", "de"]

    def test_detect_file_missing(self, profile_dir):
        """Test detect file with a missing path"""
        result = runner.invoke(
            app, ["detect", "file", "/nonexistent/path", "-p", str(profile_dir)]
        )
        assert result.exit_code == 1

    def test_missing_profile_language(self, profile_dir):
        """Test an unknown language exits with an error"""
        result = runner.invoke(
            app,
            ["detect", "text", "hello", "-p", str(profile_dir), "-l", "en,fr"],
        )

        assert result.exit_code == 1
        assert "profile 'fr' not found" in result.output

    def test_invalid_filter_pattern(self, profile_dir, tmp_path):
        """Test an invalid filter exits with an error"""
        config_file = tmp_path / "detection.yaml"
        config_file.write_text("text_filter: '[a-z'\n")

        result = runner.invoke(
            app,
            [
                "detect",
                "text",
                "hello",
                "-p",
                str(profile_dir),
                "-l",
                "en,de",
                "--config",
                str(config_file),
            ],
        )

        assert result.exit_code == 1
        assert "Invalid text filter pattern" in result.output

    def test_no_profile_dir(self, monkeypatch):
        """Test running without a profile directory"""
        monkeypatch.setattr(options.settings, "PROFILE_DIR", None)

        result = runner.invoke(app, ["detect", "text", "hello"])

        assert result.exit_code == 1
        assert "No profile directory" in result.output


class TestProfileCommands:
    """Test profile inspection commands"""

    def test_list_profiles(self, profile_dir):
        """Test listing loaded profiles"""
        result = runner.invoke(
            app, ["profiles", "list", "-p", str(profile_dir), "-l", "en,de"]
        )

        assert result.exit_code == 0
        assert "en" in result.output
        assert "de" in result.output
        assert "distinct n-grams indexed" in result.output

    def test_show_profile(self, profile_dir):
        """Test showing the top n-grams of a profile"""
        result = runner.invoke(
            app, ["profiles", "show", "de", "-p", str(profile_dir), "--top", "3"]
        )

        assert result.exit_code == 0
        assert "Profile de" in result.output

    def test_show_missing_profile(self, profile_dir):
        """Test showing an unknown profile"""
        result = runner.invoke(app, ["profiles", "show", "fr", "-p", str(profile_dir)])

        assert result.exit_code == 1
