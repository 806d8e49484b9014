from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from tinystitch.spec import (
    AmbiguousCommonNamespaceError,
    NoCommonNamespaceError,
    TinyHeader,
    UnknownNamespaceError,
)
from tinystitch.app.types import MergeOptions


@dataclass(frozen=True)
class MergeContext:
    """
    Everything a merge needs to know about namespaces, computed once.

    The per-side maps send every output namespace to its column in that
    input, or to None when the input does not have it.
    """

    common_namespace: str
    common_index_a: int
    common_index_b: int
    leave_holes: bool
    namespaces: Tuple[str, ...]
    namespace_map_a: Mapping[str, Optional[int]]
    namespace_map_b: Mapping[str, Optional[int]]


def resolve_common_namespace(
    namespaces_a: Sequence[str],
    namespaces_b: Sequence[str],
    explicit: Optional[str] = None,
) -> str:
    if explicit is not None:
        if explicit not in namespaces_a:
            raise UnknownNamespaceError(explicit, "A", namespaces_a)
        if explicit not in namespaces_b:
            raise UnknownNamespaceError(explicit, "B", namespaces_b)
        return explicit

    shared = [ns for ns in namespaces_a if ns in namespaces_b]
    if not shared:
        raise NoCommonNamespaceError(namespaces_a, namespaces_b)
    if len(shared) > 1:
        raise AmbiguousCommonNamespaceError(shared)
    return shared[0]


def union_namespaces(
    namespaces_a: Sequence[str], namespaces_b: Sequence[str]
) -> List[str]:
    return list(dict.fromkeys([*namespaces_a, *namespaces_b]))


def _index_map(
    namespaces: Sequence[str], own: Sequence[str]
) -> Mapping[str, Optional[int]]:
    positions = {ns: i for i, ns in enumerate(own)}
    return MappingProxyType({ns: positions.get(ns) for ns in namespaces})


def build_merge_context(
    header_a: TinyHeader, header_b: TinyHeader, options: MergeOptions
) -> MergeContext:
    header_a.validate()
    header_b.validate()
    namespaces_a = header_a.namespaces
    namespaces_b = header_b.namespaces
    common = resolve_common_namespace(
        namespaces_a, namespaces_b, options.common_namespace
    )
    namespaces = union_namespaces(namespaces_a, namespaces_b)

    return MergeContext(
        common_namespace=common,
        common_index_a=namespaces_a.index(common),
        common_index_b=namespaces_b.index(common),
        leave_holes=options.leave_holes,
        namespaces=tuple(namespaces),
        namespace_map_a=_index_map(namespaces, namespaces_a),
        namespace_map_b=_index_map(namespaces, namespaces_b),
    )
