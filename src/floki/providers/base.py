"""Base provider interface."""

from abc import ABC, abstractmethod
from enum import Enum


class ProviderStatus(Enum):
    """Provider resource status."""
    PRESENT = "present"
    ABSENT = "absent"


class BaseProvider(ABC):
    """Base provider interface that all providers must implement."""

    @abstractmethod
    def status(self, name: str) -> ProviderStatus:
        """Check the current status of a resource."""
        pass

    @abstractmethod
    def present(self, name: str) -> None:
        """Ensure the resource is present."""
        pass
