from .bus import SpyBus
from .workspace import WorkspaceFactory
from .helpers import tiny_file, tiny_v2_lines

__all__ = [
    "SpyBus",
    "WorkspaceFactory",
    "tiny_file",
    "tiny_v2_lines",
]
