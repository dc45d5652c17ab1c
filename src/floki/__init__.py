"""
Floki image core - resolve and obtain the container image for a build
environment.

An image is given by name, built from a Dockerfile on demand, or read out of
another YAML document.
"""

__version__ = "0.1.0"

# Re-export key components for easier access
from floki.models.config import FlokiConfig, load_config
from floki.models.image import BuildImage, Image, NameImage, YamlImage, parse_image
from floki.providers.image import image_exists_locally, pull_image

__all__ = [
    "BuildImage",
    "FlokiConfig",
    "Image",
    "NameImage",
    "YamlImage",
    "image_exists_locally",
    "load_config",
    "parse_image",
    "pull_image",
]
