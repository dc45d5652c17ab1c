"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from floki.errors import YamlDocumentError
from floki.models.config import FlokiConfig, ToolConfig, load_config
from floki.models.image import BuildImage, NameImage, YamlImage


class TestToolConfig:
    """Test ToolConfig model."""

    def test_defaults(self):
        config = ToolConfig()

        assert config.executable == "docker"
        assert config.log_level == "INFO"

    def test_log_level_normalized(self):
        assert ToolConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            ToolConfig(log_level="chatty")

        assert "log_level" in str(exc_info.value)


class TestFlokiConfig:
    """Test FlokiConfig model."""

    def test_image_by_name(self):
        config = FlokiConfig(image="foo")

        assert config.image == NameImage("foo")
        assert config.tool == ToolConfig()

    def test_image_by_build(self):
        config = FlokiConfig(image={"build": {"name": "foo"}})

        assert isinstance(config.image, BuildImage)
        assert config.image.name() == "foo:floki"

    def test_image_by_yaml(self):
        config = FlokiConfig(image={"yaml": {"file": "f.yaml", "key": "a.b"}})

        assert isinstance(config.image, YamlImage)

    def test_image_required(self):
        with pytest.raises(ValidationError) as exc_info:
            FlokiConfig()

        assert "image" in str(exc_info.value)

    def test_invalid_image(self):
        with pytest.raises(ValidationError) as exc_info:
            FlokiConfig(image={"nothing": "useful"})

        assert "image" in str(exc_info.value)

    def test_other_keys_ignored(self):
        config = FlokiConfig(image="foo", shell="bash", forward_ssh_agent=True)

        assert config.image.name() == "foo"

    def test_round_trip(self):
        config = FlokiConfig(
            image={"build": {"name": "foo", "target": "dev"}},
            tool={"executable": "podman"},
        )

        assert FlokiConfig.model_validate(config.model_dump()) == config


class TestLoadConfig:
    """Test loading configuration files."""

    def test_load(self, tmp_path):
        config_file = tmp_path / "floki.yaml"
        config_file.write_text(
            "image:\n"
            "  build:\n"
            "    name: foo\n"
            "    dockerfile: Dockerfile.dev\n"
            "tool:\n"
            "  executable: podman\n"
            "  log_level: debug\n"
            "shell: bash\n"
        )

        config = load_config(config_file)

        assert config.image.build.dockerfile == "Dockerfile.dev"
        assert config.tool.executable == "podman"
        assert config.tool.log_level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(YamlDocumentError):
            load_config(tmp_path / "floki.yaml")

    def test_malformed_file(self, tmp_path):
        config_file = tmp_path / "floki.yaml"
        config_file.write_text("image: [\n")

        with pytest.raises(YamlDocumentError):
            load_config(config_file)

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "floki.yaml"
        config_file.write_text("")

        with pytest.raises(ValidationError):
            load_config(config_file)
