import subprocess
import sys
from pathlib import Path

import pytest

from change_case_cli.main import main


def test_convert(capsys):
    assert main(["--case", "camelCase", "test string"]) == 0
    assert capsys.readouterr().out == "testString\n"


def test_convert_short_flag(capsys):
    assert main(["-c", "snakeCase", "test string"]) == 0
    assert capsys.readouterr().out == "test_string\n"


def test_case_from_config_override(capsys):
    assert main(["-o", "case=constantCase", "test string"]) == 0
    assert capsys.readouterr().out == "TEST_STRING\n"


def test_flag_wins_over_config(capsys):
    assert main(["-o", "case=constantCase", "-c", "dotCase", "test string"]) == 0
    assert capsys.readouterr().out == "test.string\n"


def test_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert 'change-case -c kebabCase "@foo BAR" # foo-bar' in out
    assert 'change-case -c trainCase "@foo BAR" # Foo-Bar' in out


def test_help_uses_configured_example(capsys):
    assert main(["-h", "-o", "example_value=hello world"]) == 0
    assert 'change-case -c pascalCase "hello world" # HelloWorld' in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["test string"],
        ["-c", "camelCase"],
        ["-c", "camelCase", "a", "b"],
        ["-c", "camelCase", "--unknown", "a"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Invalid arguments!")
    assert "Usage:" in captured.out


def test_invalid_case(capsys):
    assert main(["-c", "invalidCase", "test string"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid case type." in captured.err


def test_empty_value(capsys):
    assert main(["-c", "camelCase", ""]) == 1
    assert "No value provided." in capsys.readouterr().err


def test_invalid_case_reported_before_empty_value(capsys):
    assert main(["-c", "invalidCase", ""]) == 1
    err = capsys.readouterr().err
    assert "Invalid case type." in err
    assert "No value provided." not in err


def test_invalid_configuration(capsys):
    assert main(["-c", "camelCase", "--config", "missing_config", "x"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_help_with_missing_config(capsys):
    assert main(["--help", "--config", "missing_config"]) == 0
    captured = capsys.readouterr()
    assert "Usage:" in captured.out
    assert captured.err == ""


def test_module_run_keeps_stderr_clean():
    result = subprocess.run(
        [sys.executable, "-m", "change_case_cli", "-c", "snakeCase", "Hello World"],
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
    )
    assert result.returncode == 0
    assert result.stdout == "hello_world\n"
    assert result.stderr == ""
