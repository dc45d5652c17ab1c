"""Pydantic models for configuration and validation."""

from floki.models.config import FlokiConfig, ToolConfig, load_config
from floki.models.image import (
    BuildImage,
    BuildSpec,
    Image,
    NameImage,
    YamlImage,
    YamlSpec,
    parse_image,
)

__all__ = [
    "FlokiConfig",
    "ToolConfig",
    "load_config",
    "BuildImage",
    "BuildSpec",
    "Image",
    "NameImage",
    "YamlImage",
    "YamlSpec",
    "parse_image",
]
