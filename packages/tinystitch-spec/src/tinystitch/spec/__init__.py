__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .models import (
    NamedEntry,
    TinyHeader,
    TinyFile,
    TinyClass,
    TinyMethod,
    TinyField,
    TinyMethodParameter,
    TinyLocalVariable,
    EMPTY_CLASS,
    EMPTY_METHOD,
    EMPTY_FIELD,
)
from .exceptions import (
    TinyStitchError,
    MappingFormatError,
    DuplicateNamespaceError,
    InvalidDescriptorError,
    MergeError,
    NoCommonNamespaceError,
    AmbiguousCommonNamespaceError,
    UnknownNamespaceError,
    MissingDescriptorError,
    NoAdditionalNamespacesError,
    CommonNamespaceHoleError,
)
from .protocols import MappingReaderProtocol, MappingWriterProtocol

__all__ = [
    "NamedEntry",
    "TinyHeader",
    "TinyFile",
    "TinyClass",
    "TinyMethod",
    "TinyField",
    "TinyMethodParameter",
    "TinyLocalVariable",
    "EMPTY_CLASS",
    "EMPTY_METHOD",
    "EMPTY_FIELD",
    # Errors
    "TinyStitchError",
    "MappingFormatError",
    "DuplicateNamespaceError",
    "InvalidDescriptorError",
    "MergeError",
    "NoCommonNamespaceError",
    "AmbiguousCommonNamespaceError",
    "UnknownNamespaceError",
    "MissingDescriptorError",
    "NoAdditionalNamespacesError",
    "CommonNamespaceHoleError",
    # Protocols
    "MappingReaderProtocol",
    "MappingWriterProtocol",
]
