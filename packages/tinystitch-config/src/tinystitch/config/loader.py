import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib


class ConfigError(ValueError):
    pass


@dataclass
class MergeConfig:
    common_namespace: Optional[str] = None
    leave_holes: bool = False


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> MergeConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return MergeConfig()

    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}")
    section: Dict[str, Any] = data.get("tool", {}).get("tinystitch", {})

    common_namespace = section.get("common_namespace")
    if common_namespace is not None and not isinstance(common_namespace, str):
        raise ConfigError(
            f"[tool.tinystitch] common_namespace must be a string in {config_path}"
        )
    leave_holes = section.get("leave_holes", False)
    if not isinstance(leave_holes, bool):
        raise ConfigError(
            f"[tool.tinystitch] leave_holes must be a boolean in {config_path}"
        )

    return MergeConfig(common_namespace=common_namespace, leave_holes=leave_holes)
