"""
Tests for the input/output helpers of the command line.
"""

import io

import pytest

from encrypt_decrypt.exceptions import InputSourceError, OutputSinkError
from encrypt_decrypt.io import (
    ConfigFileModel,
    dash_to_snake_case,
    load_config,
    merge_options,
    read_message,
    write_output,
)


class TestReadMessage:
    """Test the resolution of the message."""

    def test_data_wins(self, tmp_path):
        """--data is used even when an input file is given."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("from file")
        assert read_message("from data", input_file) == "from data"

    def test_empty_data(self):
        """An empty --data is still a message."""
        assert read_message("", None, io.StringIO("from stdin")) == ""

    def test_input_file(self, tmp_path):
        """Whitespace in the input file is collapsed and trimmed."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("  Welcome   to\nhyperskill!\n\n")
        assert read_message(None, input_file) == "Welcome to hyperskill!"

    def test_missing_input_file(self, tmp_path):
        """A missing input file is reported."""
        with pytest.raises(InputSourceError, match="Incorrect input file path"):
            read_message(None, tmp_path / "missing.txt")

    def test_stdin(self):
        """Without data or file, the message comes from stdin."""
        assert read_message(stdin=io.StringIO("Hello, World!\n")) == "Hello, World!"


class TestWriteOutput:
    """Test writing the result."""

    def test_stdout(self, capsys):
        """Without a path the result goes to stdout."""
        write_output("Khoor")
        assert capsys.readouterr().out == "Khoor\n"

    def test_file(self, tmp_path):
        """With a path the result is written to the file as is."""
        output_file = tmp_path / "out.txt"
        write_output("Khoor", output_file)
        assert output_file.read_text() == "Khoor"

    def test_stdout_surrogate(self, capsys):
        """Lone surrogates are printed as a replacement character."""
        write_output("a\ud85cb")
        assert capsys.readouterr().out == "a?b\n"

    def test_file_surrogate_round_trip(self, tmp_path):
        """Lone surrogates written to a file are read back unchanged."""
        output_file = tmp_path / "out.txt"
        write_output("\ud85c", output_file)
        assert read_message(None, output_file) == "\ud85c"

    def test_directory(self, tmp_path):
        """Writing to a directory is reported."""
        with pytest.raises(OutputSinkError, match="Cannot write output file"):
            write_output("Khoor", tmp_path)


class TestLoadConfig:
    """Test the YAML configuration file."""

    def test_load(self, tmp_path):
        """Test loading all supported keys."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("mode: dec\nkey: 5\nalg: unicode\ndata: abc\nin: in.txt\nout: out.txt\n")

        config = load_config(config_file)

        assert config.mode == "dec"
        assert config.key == 5
        assert config.algorithm == "unicode"
        assert config.data == "abc"
        assert config.input_path == tmp_path / "in.txt"
        assert config.output_path == tmp_path / "out.txt"

    def test_dash_case_keys(self, tmp_path):
        """Dash-case keys are accepted."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("input-path: in.txt\noutput-path: out.txt\n")

        config = load_config(config_file)

        assert config.input_path == tmp_path / "in.txt"
        assert config.output_path == tmp_path / "out.txt"

    def test_absolute_paths_kept(self, tmp_path):
        """Absolute paths are not moved next to the configuration file."""
        config_file = tmp_path / "config.yaml"
        input_file = tmp_path / "elsewhere" / "in.txt"
        config_file.write_text(f"in: {input_file}\n")

        assert load_config(config_file).input_path == input_file

    def test_empty_file(self, tmp_path):
        """An empty file sets nothing."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file) == ConfigFileModel()

    def test_missing_file(self, tmp_path):
        """A missing file is reported."""
        with pytest.raises(InputSourceError, match="Cannot read configuration file"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        """The file must contain a mapping."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- mode\n- key\n")
        with pytest.raises(InputSourceError, match="must contain a mapping"):
            load_config(config_file)

    def test_invalid_yaml(self, tmp_path):
        """Malformed YAML is reported."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("mode: [dec\n")
        with pytest.raises(InputSourceError, match="Invalid YAML"):
            load_config(config_file)

    def test_unknown_key(self, tmp_path):
        """Unknown keys are rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("rounds: 3\n")
        with pytest.raises(InputSourceError, match="Invalid configuration file"):
            load_config(config_file)

    def test_invalid_key_type(self, tmp_path):
        """The key must be an integer."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("key: three\n")
        with pytest.raises(InputSourceError, match="Invalid configuration file"):
            load_config(config_file)


class TestMergeOptions:
    """Test merging command line options over the configuration file."""

    def test_without_config(self):
        """Only the options set on the command line are kept."""
        assert merge_options(None, mode="dec", key=None) == {"mode": "dec"}

    def test_command_line_wins(self):
        """Options given on the command line override the file."""
        config = ConfigFileModel(mode="dec", key=5)
        merged = merge_options(config, mode="enc", key=None)
        assert merged["mode"] == "enc"
        assert merged["key"] == 5

    def test_zero_key_overrides(self):
        """A key of 0 on the command line is an explicit value."""
        config = ConfigFileModel(key=5)
        assert merge_options(config, key=0)["key"] == 0


def test_dash_to_snake_case():
    assert dash_to_snake_case("input-path") == "input_path"
