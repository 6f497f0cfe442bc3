"""Unit tests for ConfigFileLoader."""

from pathlib import Path

from pattern_catalog.infrastructure.config_file_loader import ConfigFileLoader


def test_reads_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pattern-catalog]\nshow_output = true\nexclude = ["Proxy"]\n')
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {
        "show_output": True,
        "exclude": ["Proxy"],
    }


def test_walks_up_to_parent(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.pattern-catalog]\nbanner = false\n')
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert ConfigFileLoader.find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()
    assert ConfigFileLoader.load_config_from_fs(nested) == {"banner": False}


def test_missing_section_is_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "other"\n')
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_invalid_toml_is_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.pattern-catalog\n")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_non_table_section_is_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\npattern-catalog = "yes"\n')
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}
