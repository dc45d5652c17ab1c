"""Configuration models."""

import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from floki.errors import YamlDocumentError
from floki.models.image import Image, parse_image


logger = logging.getLogger(__name__)


class ToolConfig(BaseModel):
    """Settings for the external image tool."""
    executable: str = Field(default="docker")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


class FlokiConfig(BaseModel):
    """Main configuration model.

    Only ``image`` and ``tool`` are interpreted here; the rest of a floki
    configuration is left to the tool that launches the container.
    """
    model_config = ConfigDict(extra="ignore")

    image: Image
    tool: ToolConfig = Field(default_factory=ToolConfig)

    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v):
        return parse_image(v)


def _read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse YAML file."""
    try:
        content = file_path.read_text(encoding="utf-8")
        data = YAML(typ="safe").load(content)
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        logger.error(f"Error loading {file_path}: {e}")
        raise YamlDocumentError(str(file_path), str(e)) from e
    return data or {}


def load_config(config_file: Path) -> FlokiConfig:
    """Load a configuration file.

    The directory containing the file is the floki root that build paths are
    relative to.
    """
    config_file = Path(config_file)
    data = _read_yaml(config_file)
    try:
        config = FlokiConfig.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid config {config_file}: {e}")
        raise
    logger.debug(f"Loaded config: {config_file}")
    return config
