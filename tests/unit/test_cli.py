from __future__ import annotations

import json

import pytest

from clientschema import cli


def test_build_parser_supports_version_flag(capsys) -> None:
    parser = cli.build_parser()

    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0

    captured = capsys.readouterr()
    assert "0.1.0" in captured.out


def test_schema_command_prints_provider_fields(capsys) -> None:
    assert cli.main(["schema", "--provider", "sabnzbd"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["name"] == "host"
    assert payload[0]["value"] == "localhost"
    assert "selectOptions" in payload[6]


def test_definition_schema_command_prints_fields(capsys, write_definition) -> None:
    path = write_definition("id: demo\ntype: text\n")

    assert cli.main(["definition-schema", "--location", str(path)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [(field["name"], field["type"]) for field in payload] == [("username", "textbox"), ("password", "textbox")]


def test_normalize_command_writes_output_file(tmp_path, write_definition) -> None:
    path = write_definition("id: demo\nsearch:\n  path: /search\n")
    output = tmp_path / "out" / "normalized.json"

    assert cli.main(["normalize", "--location", str(path), "--output", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["encoding"] == "UTF-8"
    assert payload["search"]["paths"] == [{"path": "/search", "inheritInputs": True}]


def test_missing_definition_returns_error_code(tmp_path) -> None:
    assert cli.main(["definition-schema", "--location", str(tmp_path / "missing.yml")]) == 1


def test_no_command_prints_help(capsys) -> None:
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
