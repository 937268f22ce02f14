"""Unit tests for configuration loading.

Tests config discovery (cmdref.toml, pyproject.toml, custom path),
defaults and validation errors.
"""

import pytest

from cmdref.config import ConfigManager, DocsConfig
from cmdref.errors import ConfigError


class TestDocsConfig:
    """DocsConfig defaults and validation."""

    def test_defaults(self):
        config = DocsConfig()
        assert config.cli is None
        assert config.output_dir == "docs/reference"
        assert config.format == "markdown"
        assert config.yaml_file == "cmds.yml"
        assert config.comment_marker == "#"
        assert config.disable_autogen_tag is True

    def test_from_dict_accepts_dashed_keys(self):
        config = DocsConfig.from_dict({"output-dir": "site/ref", "cli": "myapp.cli:main"})
        assert config.output_dir == "site/ref"
        assert config.cli == "myapp.cli:main"

    def test_unknown_keys_ignored_with_warning(self, caplog):
        config = DocsConfig.from_dict({"colour": "blue"})
        assert config == DocsConfig()
        assert "Ignoring unknown config key: colour" in caplog.text

    def test_invalid_format(self):
        with pytest.raises(ConfigError, match="Invalid format: 'html'"):
            DocsConfig.from_dict({"format": "html"})

    def test_empty_output_dir(self):
        with pytest.raises(ConfigError, match="Output directory cannot be empty"):
            DocsConfig.from_dict({"output_dir": ""})

    def test_disable_autogen_tag_must_be_bool(self):
        with pytest.raises(ConfigError, match="must be true or false"):
            DocsConfig.from_dict({"disable_autogen_tag": "yes"})

    def test_to_dict_drops_none(self):
        assert "cli" not in DocsConfig().to_dict()
        assert DocsConfig(cli="a:b").to_dict()["cli"] == "a:b"


class TestConfigManager:
    """Locating and reading config files."""

    def test_no_config_uses_defaults(self, tmp_path):
        assert ConfigManager.load_config(base_dir=tmp_path) == DocsConfig()

    def test_cmdref_toml(self, tmp_path):
        (tmp_path / "cmdref.toml").write_text(
            'cli = "myapp.cli:main"\nformat = "yaml"\ndisable_autogen_tag = false\n'
        )
        config = ConfigManager.load_config(base_dir=tmp_path)
        assert config.cli == "myapp.cli:main"
        assert config.format == "yaml"
        assert config.disable_autogen_tag is False

    def test_pyproject_tool_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "myapp"\n\n[tool.cmdref]\ncli = "myapp.cli:main"\n'
            'index_url = "/docs/"\n'
        )
        config = ConfigManager.load_config(base_dir=tmp_path)
        assert config.cli == "myapp.cli:main"
        assert config.index_url == "/docs/"

    def test_pyproject_without_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "myapp"\n')
        assert ConfigManager.load_config(base_dir=tmp_path) == DocsConfig()

    def test_cmdref_toml_wins_over_pyproject(self, tmp_path):
        (tmp_path / "cmdref.toml").write_text('output_dir = "a"\n')
        (tmp_path / "pyproject.toml").write_text('[tool.cmdref]\noutput_dir = "b"\n')
        assert ConfigManager.load_config(base_dir=tmp_path).output_dir == "a"

    def test_custom_path(self, tmp_path):
        custom = tmp_path / "docs.toml"
        custom.write_text('output_dir = "custom"\n')
        assert ConfigManager.load_config(str(custom)).output_dir == "custom"

    def test_custom_path_not_found(self, tmp_path):
        with pytest.raises(ConfigError, match="Config file not found"):
            ConfigManager.load_config(str(tmp_path / "missing.toml"))

    def test_invalid_toml(self, tmp_path):
        (tmp_path / "cmdref.toml").write_text("[invalid toml\nno closing bracket")
        with pytest.raises(ConfigError, match="Failed to load config"):
            ConfigManager.load_config(base_dir=tmp_path)
