__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .core import TinyStitchApp
from .types import MergeOptions, MergeResult
from .services import MappingMerger, LegacyMerger, MergeContext

__all__ = [
    "TinyStitchApp",
    "MergeOptions",
    "MergeResult",
    "MappingMerger",
    "LegacyMerger",
    "MergeContext",
]
