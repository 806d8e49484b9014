from itertools import chain
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from tinystitch.spec import CommonNamespaceHoleError, NamedEntry, TinyMethod
from .namespaces import MergeContext

K = TypeVar("K", bound=Hashable)
E = TypeVar("E", bound=NamedEntry)

MethodKey = Tuple[str, Optional[str]]


def union(first: Iterable[K], second: Iterable[K]) -> List[K]:
    """Deduplicated union: keys of `first` in order, then unseen keys of `second`."""
    return list(dict.fromkeys(chain(first, second)))


def _shared_name(entry: NamedEntry, index: int, context: MergeContext, side: str) -> str:
    name = entry.get_name(index)
    if not name:
        raise CommonNamespaceHoleError(context.common_namespace, side)
    return name


def key_union(
    entries_a: Sequence[E], entries_b: Sequence[E], context: MergeContext
) -> List[str]:
    return union(
        (_shared_name(e, context.common_index_a, context, "A") for e in entries_a),
        (_shared_name(e, context.common_index_b, context, "B") for e in entries_b),
    )


def method_key_union(
    methods_a: Sequence[TinyMethod],
    methods_b: Sequence[TinyMethod],
    context: MergeContext,
) -> List[MethodKey]:
    # Overloads share a name, so the descriptor is part of the identity.
    return union(
        (
            (_shared_name(m, context.common_index_a, context, "A"), m.descriptor)
            for m in methods_a
        ),
        (
            (_shared_name(m, context.common_index_b, context, "B"), m.descriptor)
            for m in methods_b
        ),
    )
