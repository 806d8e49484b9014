from .namespaces import (
    MergeContext,
    build_merge_context,
    resolve_common_namespace,
    union_namespaces,
)
from .keys import key_union, method_key_union, union
from .enclosing import match_enclosing_class, match_enclosing_class_if_needed
from .headers import merge_headers
from .merger import MappingMerger, merge_comments, merge_names
from .legacy import LegacyMerger

__all__ = [
    "MergeContext",
    "build_merge_context",
    "resolve_common_namespace",
    "union_namespaces",
    "key_union",
    "method_key_union",
    "union",
    "match_enclosing_class",
    "match_enclosing_class_if_needed",
    "merge_headers",
    "MappingMerger",
    "merge_comments",
    "merge_names",
    "LegacyMerger",
]
