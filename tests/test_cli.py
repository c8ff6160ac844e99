"""Integration tests for the CLI using Typer's CliRunner."""

from typer.testing import CliRunner

from json_locale import __version__
from json_locale.cli import app
from json_locale.config import get_configuration

runner = CliRunner()


class TestCLINormalize:
    def test_normalize(self):
        result = runner.invoke(app, ["normalize", "en", "pt-BR"])
        assert result.exit_code == 0
        assert "ptbr" in result.output

    def test_normalize_requires_argument(self):
        result = runner.invoke(app, ["normalize"])
        assert result.exit_code != 0


class TestCLIAccessors:
    def test_accessors_with_locales(self):
        result = runner.invoke(app, ["accessors", "name_translations", "-l", "en", "-l", "pt-BR"])
        assert result.exit_code == 0
        assert "set_name_translations" in result.output
        assert "name_ptbr" in result.output
        assert "set_name_en" in result.output

    def test_accessors_without_locales(self):
        result = runner.invoke(app, ["accessors", "name_translations"])
        assert result.exit_code == 0
        assert "No available locales" in result.output

    def test_custom_suffix(self):
        result = runner.invoke(app, ["accessors", "title_i18n", "--suffix", "_i18n", "-l", "es"])
        assert result.exit_code == 0
        assert "title_es" in result.output

    def test_invalid_suffix(self):
        result = runner.invoke(app, ["accessors", "name"])
        assert result.exit_code == 1
        assert "does not contain the suffix" in result.output

    def test_config_file(self, tmp_path):
        toml_file = tmp_path / "locales.toml"
        toml_file.write_text('[json_locale]\navailable_locales = ["de"]\n', encoding="utf-8")

        result = runner.invoke(app, ["accessors", "name_translations", "--config", str(toml_file)])
        assert result.exit_code == 0
        assert "name_de" in result.output
        assert get_configuration().available_locales == []

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(
            app, ["accessors", "name_translations", "--config", str(tmp_path / "nope.toml")],
        )
        assert result.exit_code == 1
        assert "Error" in result.output


class TestCLIVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
