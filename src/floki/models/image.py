"""Image specification models.

An ``image`` entry takes one of three shapes, tried in this order:

1. a bare string, the image name itself (``NameImage``)
2. a mapping with a ``build`` key, built on demand (``BuildImage``)
3. a mapping with a ``yaml`` key, the name read out of another YAML
   document (``YamlImage``)

The first shape that validates wins, so a mapping carrying both ``build``
and ``yaml`` is a build.
"""

import logging
from pathlib import Path
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from floki.errors import (
    FailedToFindYamlKey,
    ImageSpecError,
    PathLookupError,
    YamlDocumentError,
)
from floki.providers.image import ImageProvider, get_default_provider
from floki.utils.yaml_path import resolve_path, split_key


logger = logging.getLogger(__name__)

DEFAULT_DOCKERFILE = "Dockerfile"
DEFAULT_CONTEXT = "."
IMAGE_TAG_SUFFIX = ":floki"


class BuildSpec(BaseModel):
    """Build an image from a Dockerfile."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Image name, without tag")
    dockerfile: str = Field(
        default=DEFAULT_DOCKERFILE, description="Dockerfile relative to the floki root"
    )
    context: str = Field(
        default=DEFAULT_CONTEXT, description="Build context relative to the floki root"
    )
    target: Optional[str] = Field(None, description="Build stage to stop at")


class YamlSpec(BaseModel):
    """Read the image name out of a YAML document."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    file: str = Field(..., description="Path to the YAML document")
    key: str = Field(..., description="Dotted key path, e.g. a.b.0.c")


class NameImage(RootModel[str]):
    """An image given directly by name."""
    model_config = ConfigDict(frozen=True)

    def name(self) -> str:
        return self.root

    def obtain_image(self, floki_root: Path, provider: Optional[ImageProvider] = None) -> str:
        return self.name()


class BuildImage(BaseModel):
    """An image built locally from a Dockerfile."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    build: BuildSpec

    def name(self) -> str:
        """Name of the built image, tagged so it never clashes with a pulled one."""
        return self.build.name + IMAGE_TAG_SUFFIX

    def obtain_image(self, floki_root: Path, provider: Optional[ImageProvider] = None) -> str:
        """Build the image and return its name."""
        provider = provider or get_default_provider()
        floki_root = Path(floki_root)
        return provider.build(
            self.name(),
            dockerfile=floki_root / self.build.dockerfile,
            context=floki_root / self.build.context,
            target=self.build.target,
        )


class YamlImage(BaseModel):
    """An image whose name lives in another YAML document."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    yaml: YamlSpec

    def name(self) -> str:
        """Load the document and look up the configured key.

        Raises:
            YamlDocumentError: the file cannot be read or is not valid YAML
            FailedToFindYamlKey: the key does not lead to a string
        """
        spec = self.yaml
        try:
            contents = Path(spec.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {spec.file}: {e}")
            raise YamlDocumentError(spec.file, str(e)) from e

        try:
            documents = list(YAML(typ="safe").load_all(contents))
        except YAMLError as e:
            logger.error(f"Invalid YAML in {spec.file}: {e}")
            raise YamlDocumentError(spec.file, str(e)) from e

        # Only the first document of a stream is consulted
        root = documents[0] if documents else None
        try:
            return resolve_path(root, split_key(spec.key))
        except PathLookupError as e:
            logger.error(f"{e} in {spec.file}")
            raise FailedToFindYamlKey(spec.key, spec.file) from e

    def obtain_image(self, floki_root: Path, provider: Optional[ImageProvider] = None) -> str:
        return self.name()


IMAGE_VARIANTS = (NameImage, BuildImage, YamlImage)

Image = Annotated[
    Union[NameImage, BuildImage, YamlImage], Field(union_mode="left_to_right")
]


def parse_image(value: Any) -> Union[NameImage, BuildImage, YamlImage]:
    """Decode raw configuration data into an image variant.

    Each variant is attempted in turn; the first that validates is returned.
    """
    if isinstance(value, IMAGE_VARIANTS):
        return value

    attempts = []
    for variant in IMAGE_VARIANTS:
        try:
            return variant.model_validate(value)
        except ValidationError as e:
            attempts.append(f"{variant.__name__}: {e.errors()[0]['msg']}")
    raise ImageSpecError(value, attempts)
