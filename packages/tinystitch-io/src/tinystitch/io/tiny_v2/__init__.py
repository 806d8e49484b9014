from .reader import TinyV2Reader
from .writer import TinyV2Writer
from .escaping import escape, unescape, ESCAPED_NAMES_PROPERTY

__all__ = [
    "TinyV2Reader",
    "TinyV2Writer",
    "escape",
    "unescape",
    "ESCAPED_NAMES_PROPERTY",
]
