__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .descriptor import (
    DescriptorKind,
    TypeDescriptor,
    parse_descriptor,
    remap_descriptor,
)
from .tiny_v1 import EntryTriple, LineKind, TinyV1File, TinyV1Line
from .tiny_v2 import TinyV2Reader, TinyV2Writer

__all__ = [
    "DescriptorKind",
    "TypeDescriptor",
    "parse_descriptor",
    "remap_descriptor",
    "EntryTriple",
    "LineKind",
    "TinyV1File",
    "TinyV1Line",
    "TinyV2Reader",
    "TinyV2Writer",
]
