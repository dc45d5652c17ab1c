"""Resource providers for floki."""

from floki.providers.base import BaseProvider, ProviderStatus
from floki.providers.image import (
    ImageProvider,
    get_default_provider,
    image_exists_locally,
    pull_image,
)

__all__ = [
    "BaseProvider",
    "ProviderStatus",
    "ImageProvider",
    "get_default_provider",
    "image_exists_locally",
    "pull_image",
]
