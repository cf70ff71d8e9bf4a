import io
import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from textops.constants import FilenamePlatform
from textops.core import cli
from textops.core.cli import apply_cli_args, main, parse_cli_args
from textops.core.config.app_config import AppConfig, LogLevel


def test_parse_tokenize_args() -> None:
    args = parse_cli_args(["tokenize", "--json", "--", "-verbose -output x"])

    assert args.command == "tokenize"
    assert args.json_output is True
    assert args.line == "-verbose -output x"


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_cli_args([])


def test_apply_cli_args_overrides_config() -> None:
    with patch("textops.core.cli.load_config", return_value=AppConfig()):
        args = parse_cli_args(
            [
                "--log-level",
                "debug",
                "--no-color",
                "filename",
                "a/b",
                "--replacement",
                "-",
                "--platform",
                "windows",
            ]
        )
        cfg = apply_cli_args(args)

    assert cfg.logging.level is LogLevel.DEBUG
    assert cfg.console.color is False
    assert cfg.filename.replacement == "-"
    assert cfg.filename.platform is FilenamePlatform.WINDOWS


def test_apply_cli_args_keeps_config_when_flags_absent() -> None:
    loaded = AppConfig()
    loaded.filename.replacement = "+"
    with patch("textops.core.cli.load_config", return_value=loaded):
        cfg = apply_cli_args(parse_cli_args(["filename", "a/b"]))

    assert cfg.filename.replacement == "+"
    assert cfg.console.color is True


class TestMain:
    def test_tokenize(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--no-color", "tokenize", "add -name John -age 30"])

        assert exit_code == 0
        assert capsys.readouterr().out == "add\n-name John\n-age 30\n"

    def test_tokenize_json_with_leading_flag(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["tokenize", "--json", "--", "-verbose -output file.txt"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == [
            "-verbose",
            "-output file.txt",
        ]

    def test_tokenize_reads_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("status\nadd -x 1\n   \n"))

        exit_code = main(["--no-color", "tokenize"])

        assert exit_code == 0
        assert capsys.readouterr().out == "status\nadd\n-x 1\n"

    @pytest.mark.parametrize(
        "argv, expected_out, expected_code",
        [
            (["is-ascii", "plain"], "true\n", 0),
            (["is-ascii", "café"], "false\n", 1),
            (["alnum", "a1!b2@"], "a1b2\n", 0),
            (["strip-diacritics", "Éric"], "Eric\n", 0),
            (["display", "HomerSimpson"], "Homer Simpson\n", 0),
            (["filename", "08/03/2017"], "08_03_2017\n", 0),
            (["filename", "a:b", "--platform", "windows"], "a_b\n", 0),
        ],
    )
    def test_text_commands(
        self,
        capsys: pytest.CaptureFixture[str],
        argv: list[str],
        expected_out: str,
        expected_code: int,
    ) -> None:
        exit_code = main(["--no-color", *argv])

        assert exit_code == expected_code
        assert capsys.readouterr().out == expected_out

    def test_invalid_argument_reports_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["--no-color", "is-ascii", ""])

        captured = capsys.readouterr()
        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert captured.out == ""
        assert "error: value must be a non-empty string" in captured.err

    def test_invalid_replacement(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--no-color", "filename", "a", "--replacement", "/"])

        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert "replacement cannot contain" in capsys.readouterr().err

    def test_bad_config_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "textops.toml"
        path.write_text("", encoding="utf-8")

        exit_code = main(["--config", str(path), "display", "x"])

        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert "Unsupported configuration file format" in capsys.readouterr().err

    def test_config_file_drives_defaults(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "textops.yaml"
        path.write_text(
            "console:\n  color: false\nfilename:\n  replacement: '-'\n",
            encoding="utf-8",
        )

        exit_code = main(["--config", str(path), "filename", "a/b"])

        assert exit_code == 0
        assert capsys.readouterr().out == "a-b\n"

    def test_configures_logging_level(self) -> None:
        main(["--no-color", "--log-level", "DEBUG", "display", "x"])

        assert logging.getLogger().level == logging.DEBUG

    def test_blank_line_prints_nothing(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["--no-color", "tokenize", "   "])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == ""
        assert captured.err == ""

    def test_unopenable_log_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        log_file = tmp_path / "missing" / "textops.log"

        exit_code = main(["--log-file", str(log_file), "display", "x"])

        captured = capsys.readouterr()
        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert captured.out == ""
        assert f"Cannot open log file {log_file}" in captured.err

    def test_unopenable_log_file_from_environment(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("TEXTOPS_LOG_FILE", str(tmp_path / "missing" / "x.log"))

        exit_code = main(["display", "x"])

        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert "Cannot open log file" in capsys.readouterr().err

    def test_invalid_config_values_are_listed(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "textops.yaml"
        path.write_text("filename:\n  platform: beos\n", encoding="utf-8")

        exit_code = main(["--config", str(path), "display", "x"])

        assert exit_code == cli.EXIT_INVALID_ARGUMENT
        assert "filename.platform:" in capsys.readouterr().err
