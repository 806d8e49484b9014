from typing import Any, Dict, Protocol
from pathlib import Path


class FileHandler(Protocol):
    """
    Protocol for catalog file handlers, one per on-disk format.
    """

    def match(self, path: Path) -> bool:
        """Returns True if this handler can parse the given file."""
        ...

    def load(self, path: Path) -> Dict[str, Any]:
        """Parses the file into a flat key -> template dictionary."""
        ...
