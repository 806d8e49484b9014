import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from .interfaces import FileHandler
from .handlers import JsonHandler

log = logging.getLogger(__name__)


class Loader:
    def __init__(self, handlers: Optional[List[FileHandler]] = None):
        self.handlers = handlers or [JsonHandler()]

    def _load_file(self, path: Path, registry: Dict[str, str]) -> None:
        for handler in self.handlers:
            if not handler.match(path):
                continue
            try:
                content = handler.load(path)
            except (OSError, ValueError) as e:
                # A broken override must not take the whole CLI down.
                log.warning(f"Skipping unreadable message catalog {path}: {e}")
                return
            for key, value in content.items():
                registry[str(key)] = str(value)
            return

    def load_directory(self, root_path: Path) -> Dict[str, str]:
        registry: Dict[str, str] = {}

        if not root_path.is_dir():
            return registry

        for dirpath, _, filenames in os.walk(root_path):
            for filename in sorted(filenames):
                self._load_file(Path(dirpath) / filename, registry)

        return registry
