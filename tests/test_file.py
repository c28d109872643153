"""Tests for reading, writing and transforming whole compose files."""
import io

import pytest
import yaml

from compose_yml.core.config import ComposeSettings, set_settings
from compose_yml.core.errors import (
    ParseError,
    ReadFileError,
    SchemaValidationError,
    UnsupportedVersionError,
    WriteFileError,
)
from compose_yml.interpolation import MappingEnvironment
from compose_yml.models import File


class TestRoundTrip:
    def test_canonical_file_round_trips(self, sample_compose):
        file = File.parse(sample_compose)
        assert file.to_node() == yaml.safe_load(sample_compose)

    def test_written_text_reads_back(self, sample_compose):
        file = File.parse(sample_compose)
        assert File.parse(file.to_yaml()) == file

    def test_write_to_stream(self, sample_compose):
        stream = io.StringIO()
        File.parse(sample_compose).write(stream)
        assert "image: postgres" in stream.getvalue()

    def test_key_order_is_preserved(self, sample_compose):
        text = File.parse(sample_compose).to_yaml()
        assert text.index("version") < text.index("services") < text.index("volumes")

    def test_default_file(self):
        file = File()
        assert file.version == "2.4"
        assert yaml.safe_load(file.to_yaml()) == {"version": "2.4"}

    def test_numeric_version_is_a_string(self):
        assert File.parse("version: 2.1\n").version == "2.1"


class TestVersionsAndValidation:
    def test_unsupported_version(self):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            File.parse('version: "100"\n')
        assert exc_info.value.version == "100"

    def test_validation_can_be_skipped(self):
        assert File.parse('version: "100"\n', validate=False).version == "100"

    def test_settings_control_validation(self):
        set_settings(ComposeSettings(validate_schema=False))
        assert File.parse('version: "3"\n').version == "3"

    def test_write_validates(self):
        with pytest.raises(UnsupportedVersionError):
            File(version="1").to_yaml()

    def test_missing_version(self):
        with pytest.raises(ParseError, match="missing field `version`"):
            File.parse("services: {}\n")

    def test_invalid_yaml(self):
        with pytest.raises(ParseError, match="invalid YAML"):
            File.parse("version: [\n")

    def test_healthcheck_needs_version_2_1(self):
        text = """\
version: "2"
services:
  db:
    image: postgres
    healthcheck:
      test: ["CMD", "pg_isready"]
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            File.parse(text)
        assert any("requires version 2.1" in error for error in exc_info.value.errors)
        assert File.parse(text.replace('"2"', '"2.1"')).services["db"].healthcheck is not None

    def test_service_names_are_checked(self):
        with pytest.raises(SchemaValidationError, match="invalid service name"):
            File.parse('version: "2"\nservices:\n  "web app":\n    image: nginx\n')


class TestPaths:
    def test_read_and_write_paths(self, compose_path, tmp_path):
        file = File.read_from_path(compose_path)
        out = tmp_path / "out" / "compose.yml"
        out.parent.mkdir()
        file.write_to_path(out)
        assert File.read_from_path(out) == file

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.yml"
        with pytest.raises(ReadFileError) as exc_info:
            File.read_from_path(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_read_errors_keep_their_cause(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text('version: "100"\n')
        with pytest.raises(ReadFileError) as exc_info:
            File.read_from_path(path)
        assert isinstance(exc_info.value.__cause__, UnsupportedVersionError)

    def test_write_errors(self, tmp_path):
        with pytest.raises(WriteFileError) as exc_info:
            File(version="1").write_to_path(tmp_path / "x.yml")
        assert isinstance(exc_info.value.__cause__, UnsupportedVersionError)
        assert not (tmp_path / "x.yml").exists()


class TestStandalone:
    @pytest.fixture
    def project(self, tmp_path):
        (tmp_path / "app.env").write_text("A=1\n# comment\n\nB=from-file\nC=$HOME\n")
        (tmp_path / "docker-compose.yml").write_text("""\
version: "2"
services:
  app:
    image: ${IMAGE}
    env_file: app.env
    environment:
      B: explicit
""")
        return tmp_path

    def test_inline_all(self, project):
        file = File.read_from_path(project / "docker-compose.yml")
        file.inline_all(project)
        app = file.services["app"]
        assert app.env_files == []
        assert {key: str(entry) for key, entry in app.environment.items()} == {
            "A": "1",
            "B": "explicit",
            "C": "$$HOME",
        }
        assert app.environment["C"].value() == "$HOME"

    def test_make_standalone(self, project):
        file = File.read_from_path(project / "docker-compose.yml")
        file.make_standalone(project, MappingEnvironment({"IMAGE": "nginx"}))
        node = file.to_node()["services"]["app"]
        assert node["image"] == "nginx"
        assert "env_file" not in node
        assert node["environment"]["A"] == "1"

    def test_missing_env_file(self, project):
        (project / "app.env").unlink()
        file = File.read_from_path(project / "docker-compose.yml")
        with pytest.raises(ReadFileError):
            file.inline_all(project)
