"""Base classes for import detectors."""

from abc import ABC, abstractmethod


class ImportDetector(ABC):
    """Contract for deciding whether a file's text imports a given name."""

    name: str = ""

    @abstractmethod
    def is_imported(self, export_name: str, contents: str) -> bool:
        """Return True when ``contents`` appears to import ``export_name``."""
