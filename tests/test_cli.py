"""CLI smoke tests."""

import json

from typer.testing import CliRunner

from geoc.main import app


def test_parse_cli_success():
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "48-33-27N"])
    assert result.exit_code == 0
    assert "Value: 48.557500" in result.output
    assert "Location: Lat" in result.output
    assert "Format: DMS" in result.output


def test_parse_cli_json_output():
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--json", "--pretty", "120-5749E"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["location"] == "Lon"
    assert payload["format"] == "DMS"
    assert abs(payload["value"] - 120.963611) < 1e-6
    assert payload["text"] == "120-57.8E"
    assert payload["_meta"]["generator"]["name"] == "geoc"


def test_parse_cli_reports_errors():
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "98N"])
    assert result.exit_code == 1
    assert "Parse error:" in result.output


def test_parse_point_cli():
    runner = CliRunner()
    result = runner.invoke(app, ["parse-point", "48-33-27N; 120-5749E"])
    assert result.exit_code == 0
    assert "Latitude: 48.557500" in result.output
    assert "Longitude: 120.963611" in result.output


def test_parse_point_cli_json_output():
    runner = CliRunner()
    result = runner.invoke(app, ["parse-point", "--json", "48-33N; 048-33.0E"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["lat"]["location"] == "Lat"
    assert payload["lon"]["location"] == "Lon"


def test_parse_point_cli_reports_format_mismatch():
    runner = CliRunner()
    result = runner.invoke(app, ["parse-point", "48-3327N; 48°33.4493'E"])
    assert result.exit_code == 1
    assert "Parse error:" in result.output


def test_format_cli_flips_hemisphere():
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--loc", "lat", "--", "-48.5575", "48°33'27\"N"])
    assert result.exit_code == 0
    assert result.output.strip() == "48°33'27\"S"


def test_format_cli_rejects_unknown_location():
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--loc", "up", "48", "48N"])
    assert result.exit_code == 1
    assert "Format error:" in result.output


def test_format_cli_out_of_range():
    runner = CliRunner()
    result = runner.invoke(app, ["format", "91", "48°33'27\"N"])
    assert result.exit_code == 1
    assert "Format error:" in result.output


def test_format_point_cli_defaults():
    runner = CliRunner()
    result = runner.invoke(app, ["format-point", "48.5575", "120.963611"])
    assert result.exit_code == 0
    assert result.output.strip() == "48-33.4N 120-57.8E"


def test_format_point_cli_templates():
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "format-point",
            "--lat-template",
            "48°33'27\"N",
            "--lon-template",
            "120-5749E",
            "--separator",
            "; ",
            "48.5575",
            "120.963611",
        ],
    )
    assert result.exit_code == 0
    assert result.output.strip() == "48°33'27\"N; 120-5749E"


def test_convert_cli():
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "48-33-27N", "48.557489"])
    assert result.exit_code == 0
    assert result.output.strip() == "48.557500"


def test_convert_cli_invalid_template():
    runner = CliRunner()
    result = runner.invoke(app, ["convert", "48-33-27N", "invalid"])
    assert result.exit_code == 1
    assert "Convert error:" in result.output
