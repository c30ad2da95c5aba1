"""
Tests for CLI commands — generate, resolve, config, and global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from autoerror.main import cli


class TestCLIGlobal:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "derive Display, Error and From" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def test_stdout(self, declaration_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file)])
        assert result.exit_code == 0
        assert "impl ::std::convert::From<String> for Error {" in result.output
        assert 'Self::IO(f0) => write!(f, "IO: {}", f0),' in result.output

    def test_json(self, declaration_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["types"][0]["conversions"] == [{"source_type": "String", "variant": "Other"}]
        assert data["file"]["path"] == "errors.rs"

    def test_writes_file(self, declaration_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file), "-o", "src/impls.rs"])
        assert result.exit_code == 0
        assert "Wrote src/impls.rs" in result.output
        content = (tmp_path / "src" / "impls.rs").read_text()
        assert content.startswith("// @generated by autoerror")

    def test_refuses_overwrite(self, declaration_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "impls.rs").write_text("// handwritten\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file), "-o", "impls.rs"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (tmp_path / "impls.rs").read_text() == "// handwritten\n"

    def test_overwrite_unchanged(self, declaration_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        args = ["generate", str(declaration_file), "-o", "impls.rs", "--overwrite"]
        assert runner.invoke(cli, args).exit_code == 0
        second = runner.invoke(cli, args)
        assert second.exit_code == 0
        assert "(unchanged)" in second.output

    def test_json_with_output_writes_file(self, declaration_file: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file), "-o", "out.rs", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["written"]["written"] is True
        assert data["written"]["path"] == "out.rs"
        assert (tmp_path / "out.rs").read_text() == data["file"]["content"]

    def test_json_with_output_reports_write_error(
        self, declaration_file: Path, tmp_path: Path, monkeypatch
    ):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "out.rs").write_text("// handwritten\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(declaration_file), "-o", "out.rs", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["written"]["written"] is False
        assert "already exists" in data["written"]["error"]
        assert (tmp_path / "out.rs").read_text() == "// handwritten\n"

    def test_generation_failure(self, tmp_path: Path):
        path = tmp_path / "errors.yml"
        path.write_text(
            "name: Error\n"
            "variants:\n"
            "  - name: A\n"
            "    fields: [String]\n"
            "    annotations: {make_from: true}\n"
            "  - name: B\n"
            "    fields: [String]\n"
            "    annotations: {make_from: true}\n"
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(path), "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["kind"] == "ConflictingConversion"

    def test_missing_declaration(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_settings_from_config_option(self, tmp_path: Path):
        decl = tmp_path / "errors.yml"
        decl.write_text("name: Error\nvariants:\n  - name: Wrap\n    fields: [Failure]\n")
        settings = tmp_path / "custom.yml"
        settings.write_text("error_type_names: [Failure]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(settings), "generate", str(decl)])
        assert result.exit_code == 0
        assert "Self::Wrap(e) => Some(e)," in result.output


class TestResolveCommand:
    def test_table(self, declaration_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", str(declaration_file)])
        assert result.exit_code == 0
        assert "NotFound()" in result.output
        assert "Other(String)  [from]" in result.output
        assert "String → Error::Other" in result.output

    def test_json_has_no_file(self, declaration_file: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", str(declaration_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert "file" not in data
        io = data["types"][0]["variants"][1]
        assert io["display"] == {"kind": "template", "text": "IO: {}"}
        assert io["is_cause"] is False

    def test_malformed(self, tmp_path: Path):
        path = tmp_path / "errors.yml"
        path.write_text("name: Error\nvariants:\n  - name: Empty\n    annotations: {err: true}\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", str(path)])
        assert result.exit_code == 1
        assert "Error: Empty: Wrapped errors should have exactly 1 field" in result.output


class TestConfigCommands:
    def test_check_valid(self, tmp_path: Path):
        path = tmp_path / "autoerror.yml"
        path.write_text("error_match: last_segment\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path), "config", "check"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_check_invalid_json(self, tmp_path: Path):
        path = tmp_path / "autoerror.yml"
        path.write_text("error_match: nope\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(path), "config", "check", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["valid"] is False

    def test_show_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "error_type_names": ["Error"],
            "error_match": "last_segment",
            "field_delimiter": " ",
        }
