import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "TINYSTITCH_LANG"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Walks upwards looking for pyproject.toml, then .git.
    Falls back to the starting directory.
    """
    start = (start_dir or Path.cwd()).resolve()
    current_dir = start
    while current_dir.parent != current_dir:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return start


class Needle:
    """
    Resolves semantic pointers to message templates.

    Every root may contribute two directories per language:
    `<root>/needle/<lang>` for packaged assets and
    `<root>/.tinystitch/needle/<lang>` for project overrides. Later roots
    override earlier ones, so package asset roots are prepended with
    `add_root` and the project root stays last.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self.roots: List[Path] = list(roots) if roots else [find_project_root()]
        self._loader = Loader()
        self._registry: Dict[str, Dict[str, str]] = {}
        self._loaded_langs: Set[str] = set()

    def add_root(self, path: Path) -> None:
        if path in self.roots:
            return
        self.roots.insert(0, path)
        # New roots invalidate whatever was merged so far.
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str) -> None:
        if lang in self._loaded_langs:
            return

        merged: Dict[str, str] = {}
        for root in self.roots:
            merged.update(self._loader.load_directory(root / "needle" / lang))
            merged.update(
                self._loader.load_directory(root / ".tinystitch" / "needle" / lang)
            )

        self._registry[lang] = merged
        self._loaded_langs.add(lang)

    def _lookup(self, key: str, lang: str) -> Optional[str]:
        self._ensure_lang_loaded(lang)
        return self._registry.get(lang, {}).get(key)

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Lookup order: requested language, default language, then the key
        itself so that a missing template still prints something useful.
        """
        key = str(pointer)
        target_lang = lang or os.getenv(LANG_ENV_VAR, self.default_lang)

        value = self._lookup(key, target_lang)
        if value is None and target_lang != self.default_lang:
            value = self._lookup(key, self.default_lang)
        return key if value is None else value


needle = Needle()
