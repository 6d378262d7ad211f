"""Unit tests for the md2whatsapp command-line entry point."""

import io

import pytest

from md2whatsapp import __version__
from md2whatsapp.cli import build_renderer_options, main
from md2whatsapp.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2whatsapp.exceptions import FileError, ParsingError, RenderingError, ValidationError

TABLE_MARKDOWN = "| A | B |\n|---|---|\n| 1 | 2 |\n"


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (FileError("missing"), EXIT_FILE_ERROR),
            (ParsingError("tokens"), EXIT_PARSING_ERROR),
            (RenderingError("render"), EXIT_RENDERING_ERROR),
            (RuntimeError("other"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, code):
        assert get_exit_code_for_exception(exception) == code


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test running the CLI end to end."""

    def test_file_to_stdout(self, isolated_config, capsys):
        source = isolated_config / "in.md"
        source.write_text("# Hi\n\n**bold** text\n", encoding="utf-8")
        assert main([str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "*📌 Hi*\n\n*bold* text\n"

    def test_stdin_to_file(self, isolated_config, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("- a\n  - b\n"))
        target = isolated_config / "out.txt"
        assert main(["-", "--out", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "* a\n* ◦ b\n"

    def test_omitted_input_reads_stdin(self, isolated_config, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("plain"))
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "plain\n"

    def test_table_format_flag(self, isolated_config, capsys):
        source = isolated_config / "table.md"
        source.write_text(TABLE_MARKDOWN, encoding="utf-8")
        assert main([str(source), "--table-format", "always-list"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* *A:* 1\n* ◦ _B:_ 2\n"

    def test_missing_input_file(self, isolated_config, capsys):
        assert main([str(isolated_config / "nope.md")]) == EXIT_FILE_ERROR
        assert capsys.readouterr().err.startswith("Error during conversion: Cannot read input file")

    def test_conversion_failure_reported(self, isolated_config, monkeypatch, capsys):
        def _fail(markdown, options=None, parser_options=None):
            raise RenderingError("renderer broke")

        monkeypatch.setattr("md2whatsapp.cli.to_whatsapp", _fail)
        monkeypatch.setattr("sys.stdin", io.StringIO("text"))
        assert main([]) == EXIT_RENDERING_ERROR
        assert "Error during conversion: renderer broke" in capsys.readouterr().err

    def test_bad_config_file(self, isolated_config, capsys):
        config_file = isolated_config / "broken.json"
        config_file.write_text("{oops")
        assert main(["--config", str(config_file)]) == EXIT_VALIDATION_ERROR
        assert "Invalid JSON" in capsys.readouterr().err

    def test_invalid_threshold_flag(self, isolated_config):
        with pytest.raises(SystemExit) as exc_info:
            main(["--table-threshold", "0"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestRendererOptionPriority:
    """Test flags > environment > config file > defaults."""

    def _options(self, args):
        return build_renderer_options(create_parser().parse_args(args))

    def test_defaults(self, isolated_config):
        options = self._options([])
        assert options.table_format == "auto"
        assert options.table_threshold == 26

    def test_config_file(self, isolated_config):
        (isolated_config / ".md2whatsapp.toml").write_text('table_format = "always-ascii"\ntable_threshold = 40\n')
        options = self._options([])
        assert options.table_format == "always-ascii"
        assert options.table_threshold == 40

    def test_environment_overrides_config(self, isolated_config, monkeypatch):
        (isolated_config / ".md2whatsapp.toml").write_text('table_format = "always-ascii"\ntable_threshold = 40\n')
        monkeypatch.setenv("MD2WHATSAPP_TABLE_FORMAT", "always-list")
        options = self._options([])
        assert options.table_format == "always-list"
        assert options.table_threshold == 40

    def test_flags_override_environment(self, isolated_config, monkeypatch):
        monkeypatch.setenv("MD2WHATSAPP_TABLE_THRESHOLD", "50")
        monkeypatch.setenv("MD2WHATSAPP_MAX_TABLE_ROWS", "3")
        options = self._options(["--table-threshold", "60"])
        assert options.table_threshold == 60
        assert options.max_table_rows == 3

    def test_config_env_variable(self, isolated_config, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("max_table_rows: 7\n")
        monkeypatch.setenv("MD2WHATSAPP_CONFIG", str(config_file))
        assert self._options([]).max_table_rows == 7

    def test_no_config_skips_files(self, isolated_config, monkeypatch):
        (isolated_config / ".md2whatsapp.toml").write_text('table_format = "always-ascii"\n')
        monkeypatch.setenv("MD2WHATSAPP_TABLE_THRESHOLD", "30")
        options = self._options(["--no-config"])
        assert options.table_format == "auto"
        assert options.table_threshold == 30

    def test_invalid_environment_value_falls_back(self, isolated_config, monkeypatch):
        monkeypatch.setenv("MD2WHATSAPP_TABLE_FORMAT", "sideways")
        assert self._options([]).table_format == "auto"
