"""Image provider wrapping the docker command line."""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from floki.errors import (
    CommandLaunchError,
    FailedToBuildImage,
    FailedToCheckForImage,
    FailedToPullImage,
)
from floki.providers.base import BaseProvider, ProviderStatus
from floki.utils.process import run_command

if TYPE_CHECKING:
    from floki.models.config import ToolConfig


logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "docker"


class ImageProvider(BaseProvider):
    """Provider for building, pulling and inspecting docker images."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE):
        """Initialize image provider."""
        self.executable = executable

    @classmethod
    def from_config(cls, config: "ToolConfig") -> "ImageProvider":
        return cls(executable=config.executable)

    def build(
        self,
        image: str,
        dockerfile: Path,
        context: Path,
        target: Optional[str] = None,
    ) -> str:
        """Build ``image`` and return its name.

        Output from the build is shown to the user as it happens.
        """
        cmd = [self.executable, "build", "-t", image, "-f", str(dockerfile)]
        if target:
            cmd.extend(["--target", target])
        cmd.append(str(context))

        logger.info(f"Building image {image}")
        result = run_command(cmd)
        if not result.success:
            exit_status = result.exit_status(f"{self.executable} build")
            logger.error(f"Failed to build image {image}: {exit_status}")
            raise FailedToBuildImage(image, exit_status)

        logger.info(f"Image {image} built successfully")
        return image

    def pull(self, name: str) -> None:
        """Pull an image by name."""
        logger.debug(f"Pulling image: {name}")
        result = run_command([self.executable, "pull", name])
        if not result.success:
            exit_status = result.exit_status(f"{self.executable} pull")
            logger.error(f"Failed to pull image {name}: {exit_status}")
            raise FailedToPullImage(name, exit_status)
        logger.info(f"Image {name} pulled successfully")

    def exists(self, name: str) -> bool:
        """Check whether an image is available locally.

        Any non-zero exit from ``docker history`` means the image is absent;
        only a failure to start the command is an error.
        """
        try:
            result = run_command([self.executable, "history", name], quiet=True)
        except CommandLaunchError as e:
            raise FailedToCheckForImage(name, e.error) from e
        return result.returncode == 0

    def status(self, name: str) -> ProviderStatus:
        """Check if image exists."""
        if self.exists(name):
            return ProviderStatus.PRESENT
        return ProviderStatus.ABSENT

    def present(self, name: str) -> None:
        """Ensure image is present, pulling it if needed."""
        if self.status(name) == ProviderStatus.PRESENT:
            logger.debug(f"Image {name} already present")
            return
        self.pull(name)


def get_default_provider() -> ImageProvider:
    """Return a provider using the plain ``docker`` executable."""
    return ImageProvider()


def pull_image(name: str) -> None:
    """Pull an image by its name."""
    get_default_provider().pull(name)


def image_exists_locally(name: str) -> bool:
    """Determine whether an image exists locally."""
    return get_default_provider().exists(name)
