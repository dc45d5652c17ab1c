"""
Exceptions raised while resolving and obtaining images.

Exception Hierarchy:
    FlokiError (base)
    ├── ImageSpecError - configuration value matches no image variant
    ├── YamlDocumentError - document could not be read or parsed
    ├── FailedToFindYamlKey - key path does not lead to a string
    ├── PathLookupError - a single path segment could not be followed
    ├── CommandLaunchError - external tool could not be started
    ├── FailedToBuildImage - docker build exited unsuccessfully
    ├── FailedToPullImage - docker pull exited unsuccessfully
    └── FailedToCheckForImage - docker history could not be started
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence


@dataclass(frozen=True)
class SubprocessExitStatus:
    """Exit status of an external command, kept for diagnostics."""
    process_description: str
    returncode: int

    @property
    def signal(self) -> Optional[int]:
        """Signal number when the process was killed by a signal."""
        if self.returncode < 0:
            return -self.returncode
        return None

    def __str__(self) -> str:
        if self.signal is not None:
            return f"{self.process_description} terminated by signal {self.signal}"
        return f"{self.process_description} exited with status {self.returncode}"


class FlokiError(Exception):
    """
    Base exception for all image errors.

    Attributes:
        message: Human-readable error description
        details: Structured context for logging
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception to a dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ImageSpecError(FlokiError, ValueError):
    """Raised when a configuration value matches none of the image forms."""

    def __init__(self, value: Any, attempts: Sequence[str]):
        self.value = value
        self.attempts = list(attempts)
        reasons = "; ".join(self.attempts)
        super().__init__(
            f"Image must be a name, a 'build' mapping or a 'yaml' mapping: {reasons}",
            {"value": value},
        )


class YamlDocumentError(FlokiError):
    """Raised when a YAML document cannot be read or parsed."""

    def __init__(self, file: str, reason: str):
        self.file = file
        self.reason = reason
        super().__init__(f"Could not load YAML from {file}: {reason}", {"file": file})


class FailedToFindYamlKey(FlokiError):
    """Raised when a key path does not lead to a string in a YAML document."""

    def __init__(self, key: str, file: str):
        self.key = key
        self.file = file
        super().__init__(
            f"Could not find key '{key}' in YAML file {file}",
            {"key": key, "file": file},
        )


class PathLookupError(FlokiError):
    """Raised when a document path cannot be followed."""

    def __init__(self, segment: str, path: Sequence[str], reason: str):
        self.segment = segment
        self.path = list(path)
        self.reason = reason
        super().__init__(
            f"Cannot resolve '{'.'.join(self.path)}' at '{segment}': {reason}",
            {"segment": segment},
        )


class CommandLaunchError(FlokiError):
    """Raised when an external command cannot be started at all."""

    def __init__(self, command: Sequence[str], error: OSError):
        self.command = list(command)
        self.error = error
        super().__init__(
            f"Failed to run '{' '.join(self.command)}': {error}",
            {"command": self.command},
        )


class FailedToBuildImage(FlokiError):
    """Raised when the image build exits unsuccessfully."""

    def __init__(self, image: str, exit_status: SubprocessExitStatus):
        self.image = image
        self.exit_status = exit_status
        super().__init__(
            f"Failed to build image {image}: {exit_status}",
            {"image": image, "returncode": exit_status.returncode},
        )


class FailedToPullImage(FlokiError):
    """Raised when pulling an image exits unsuccessfully."""

    def __init__(self, image: str, exit_status: SubprocessExitStatus):
        self.image = image
        self.exit_status = exit_status
        super().__init__(
            f"Failed to pull image {image}: {exit_status}",
            {"image": image, "returncode": exit_status.returncode},
        )


class FailedToCheckForImage(FlokiError):
    """Raised when the local image check cannot be run."""

    def __init__(self, image: str, error: Exception):
        self.image = image
        self.error = error
        super().__init__(
            f"Failed to check for image {image}: {error}",
            {"image": image},
        )
