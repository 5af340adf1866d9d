"""
Tests for the codepoet command line.
"""

import json
from unittest.mock import patch

import pytest

from codepoet.codegen import cli_integration
from codepoet.main import build_parser, main


@pytest.fixture
def model_file(tmp_path, point_model):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(point_model), encoding="utf-8")
    return path


def test_parser_render_options():
    args = build_parser().parse_args(
        ["render", "model.json", "-o", "out", "--indent", "2", "--tabs", "--no-header"]
    )

    assert args.command == "render"
    assert args.file == "model.json"
    assert args.output == "out"
    assert args.indent == 2
    assert args.tabs
    assert args.no_header


def test_build_config_from_args():
    args = build_parser().parse_args(
        ["render", "m.json", "--framework", "Kit", "--indent", "2", "--date", "2024-01-31"]
    )
    config = cli_integration._build_config(args)

    assert config.framework == "Kit"
    assert config.indent_size == 2
    assert config.header_date == "2024-01-31"


def test_render_to_directory(tmp_path, model_file):
    out_dir = tmp_path / "Sources"

    code = main(["render", str(model_file), "-o", str(out_dir), "--date", "2024-01-31"])

    assert code == 0
    text = (out_dir / "Point.swift").read_text(encoding="utf-8")
    assert text.startswith("//\n//  Point.swift\n//\n//  Geometry\n")
    assert "//  Generated by CodePoet on 1/31/24\n" in text
    assert "public struct Point: Equatable {\n" in text


def test_render_to_stdout(model_file):
    with patch.object(cli_integration.console, "print") as mock_print:
        code = main(["render", str(model_file), "--no-header"])

    assert code == 0
    assert mock_print.called


def test_render_from_url(tmp_path, point_model):
    with patch.object(
        cli_integration, "load_json", return_value=("url", point_model)
    ) as mock_load:
        code = main(["render", "--url", "https://example.com/m.json", "-o", str(tmp_path)])

    assert code == 0
    mock_load.assert_called_once_with(url="https://example.com/m.json")
    assert (tmp_path / "Point.swift").exists()


def test_render_requires_input():
    assert main(["render"]) == 1


def test_render_missing_file(tmp_path):
    assert main(["render", str(tmp_path / "absent.json")]) == 1


def test_render_invalid_model(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"types": [{"kind": "struct"}]}), encoding="utf-8")

    assert main(["render", str(path)]) == 1


def test_render_model_with_wrong_scalar_types(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"types": [{"name": 5}]}), encoding="utf-8")

    assert main(["render", str(path)]) == 1


def test_render_bad_config(tmp_path, model_file):
    config = tmp_path / "config.json"
    config.write_text("[]", encoding="utf-8")

    assert main(["render", str(model_file), "--config", str(config)]) == 1


def test_info():
    assert main(["info"]) == 0


def test_info_saves_default_config(tmp_path, model_file):
    config_path = tmp_path / "codepoet.json"

    assert main(["info", "--save-config", str(config_path)]) == 0
    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved["indent_size"] == 4
    assert saved["file_extension"] == ".swift"

    out_dir = tmp_path / "out"
    assert main(["render", str(model_file), "--config", str(config_path), "-o", str(out_dir)]) == 0
    assert (out_dir / "Point.swift").exists()


def test_info_save_config_unwritable(tmp_path):
    assert main(["info", "--save-config", str(tmp_path / "missing" / "c.json")]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
