"""Base classes for embedded-metadata providers."""

from abc import ABC, abstractmethod
from typing import ClassVar

from photoaudit.models import GPSRawTagBlock


class EmbeddedMetadata(ABC):
    """Embedded properties of one opened image.

    Accessors return None when a property is not present. The object is
    bound to a single file and holds no open handles.
    """

    @abstractmethod
    def camera_make(self) -> str | None:
        pass

    @abstractmethod
    def camera_model(self) -> str | None:
        pass

    @abstractmethod
    def dimensions(self) -> str | None:
        pass

    @abstractmethod
    def date_taken(self) -> str | None:
        pass

    @abstractmethod
    def orientation(self) -> str | None:
        pass

    @abstractmethod
    def title(self) -> str | None:
        pass

    @abstractmethod
    def subject(self) -> str | None:
        pass

    @abstractmethod
    def description(self) -> str | None:
        pass

    @abstractmethod
    def keywords(self) -> list[str]:
        pass

    @abstractmethod
    def gps_block(self) -> GPSRawTagBlock:
        """Return the raw GPS tag payloads (empty block if none)."""
        pass


class BaseMetadataProvider(ABC):
    """Abstract base class for embedded-metadata providers.

    Providers wrap an image codec. They follow the same plugin layout as
    the rest of the package: each checks its own availability and is
    picked by priority.

    Attributes:
        name: Human-readable name of the provider
        priority: Lower numbers are preferred (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this provider is available.

        Returns:
            True if all dependencies are available
        """
        pass

    @abstractmethod
    def open(self, path: str) -> EmbeddedMetadata:
        """Read the embedded properties of an image.

        Args:
            path: Path to the image file

        Returns:
            EmbeddedMetadata bound to the file

        Raises:
            MetadataUnavailable: If the codec cannot read the file as an image
            OSError: If the file cannot be read at all
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
