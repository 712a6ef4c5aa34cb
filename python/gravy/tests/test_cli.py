"""Tests for the gravy command line."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from gravy.cli import app

runner = CliRunner()


class TestCaseCommand:
    """Test the case command."""

    def test_to_snake(self):
        """Test keys convert to snake_case by default."""
        result = runner.invoke(app, ["case", "postDate", "userIdentifier"])

        assert result.exit_code == 0
        assert result.stdout.split() == ["post_date", "user_id"]

    def test_to_camel(self):
        """Test keys convert to camelCase."""
        result = runner.invoke(app, ["case", "--to", "camel", "post_date", "id"])

        assert result.exit_code == 0
        assert result.stdout.split() == ["postDate", "identifier"]

    def test_unknown_case(self):
        """Test an unknown target case exits with usage status."""
        result = runner.invoke(app, ["case", "--to", "kebab", "postDate"])
        assert result.exit_code == 2


class TestRecaseCommand:
    """Test the recase command."""

    def test_stdin_to_stdout(self):
        """Test a document read from stdin has every key converted."""
        document = {"postDate": "2013", "items": [{"userIdentifier": "A", "tagList": ["x"]}]}
        result = runner.invoke(app, ["recase"], input=json.dumps(document))

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "post_date": "2013",
            "items": [{"user_id": "A", "tag_list": ["x"]}],
        }

    def test_values_untouched(self):
        """Test numbers keep their exact JSON spelling."""
        text = '{"priceValue": 1.0, "bigNumber": 99999999999999999999999}'
        result = runner.invoke(app, ["recase"], input=text)

        assert result.exit_code == 0
        assert result.stdout.strip() == (
            '{"price_value": 1.0, "big_number": 99999999999999999999999}'
        )

    def test_file_to_file(self, tmp_path):
        """Test reading from and writing to files."""
        source = tmp_path / "in.json"
        target = tmp_path / "out.json"
        source.write_text(json.dumps({"post_date": 1}), encoding="utf-8")

        result = runner.invoke(
            app, ["recase", str(source), "--to", "camel", "--output", str(target)]
        )

        assert result.exit_code == 0
        assert "Wrote" in result.stdout
        assert json.loads(target.read_text(encoding="utf-8")) == {"postDate": 1}

    def test_missing_file(self, tmp_path):
        """Test an unreadable input file fails."""
        result = runner.invoke(app, ["recase", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_invalid_json(self):
        """Test invalid JSON input fails."""
        result = runner.invoke(app, ["recase"], input="{not json")
        assert result.exit_code == 1
