from pathlib import Path

from tinystitch.app import TinyStitchApp


def get_project_root() -> Path:
    return Path.cwd()


def make_app() -> TinyStitchApp:
    return TinyStitchApp(root_path=get_project_root())
