"""Unit tests for YAML file loading."""

from pathlib import Path

import yaml

from errorvec.cli_components.file_loader import LoadedFile, LoadError, YamlFileLoader
from errorvec.outcome import Failure, Success


class TestYamlFileLoader:
    """Unit tests for YamlFileLoader."""

    def test_load_valid_file(self, valid_yaml_file: Path):
        """A well-formed file becomes a Success with parsed data."""
        result = YamlFileLoader().load(valid_yaml_file)

        assert isinstance(result, Success)
        assert result.value == LoadedFile(
            path=valid_yaml_file, data={"name": "test", "items": ["a", "b"]}
        )

    def test_load_empty_file(self, tmp_path: Path):
        """An empty document loads as None rather than failing."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        result = YamlFileLoader().load(path)

        assert result == Success(LoadedFile(path=path, data=None))

    def test_load_missing_file(self, missing_file: Path):
        """A missing file becomes a Failure chaining the OSError."""
        result = YamlFileLoader().load(missing_file)

        assert isinstance(result, Failure)
        assert isinstance(result.error, LoadError)
        assert result.error.path == missing_file
        assert str(result.error) == f"{missing_file}: No such file or directory"
        assert isinstance(result.error.__cause__, FileNotFoundError)

    def test_load_malformed_yaml(self, invalid_yaml_file: Path):
        """A syntax error becomes a Failure chaining the YAMLError."""
        result = YamlFileLoader().load(invalid_yaml_file)

        assert isinstance(result, Failure)
        assert str(result.error).startswith(f"{invalid_yaml_file}: ")
        assert isinstance(result.error.__cause__, yaml.YAMLError)

    def test_load_undecodable_file(self, tmp_path: Path):
        """Bytes that are not UTF-8 fail instead of raising."""
        path = tmp_path / "binary.yml"
        path.write_bytes(b"\xff\xfe\x00bad")

        result = YamlFileLoader().load(path)

        assert isinstance(result, Failure)
        assert isinstance(result.error.__cause__, UnicodeDecodeError)


class TestLoadError:
    """Unit tests for LoadError."""

    def test_message_includes_path(self):
        error = LoadError(Path("a.yml"), "broken")

        assert str(error) == "a.yml: broken"
        assert error.reason == "broken"

    def test_from_exception_uses_strerror(self):
        cause = FileNotFoundError(2, "No such file or directory")

        error = LoadError.from_exception(Path("a.yml"), cause)

        assert error.reason == "No such file or directory"
        assert error.__cause__ is cause

    def test_from_exception_falls_back_to_str(self):
        cause = ValueError("odd value")

        error = LoadError.from_exception(Path("a.yml"), cause)

        assert error.reason == "odd value"
