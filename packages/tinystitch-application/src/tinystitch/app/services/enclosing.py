import logging
from typing import Mapping, Optional

from tinystitch.spec import TinyClass

log = logging.getLogger(__name__)

INNER_CLASS_SEPARATOR = "$"


def match_enclosing_class(
    key: str, classes: Mapping[str, TinyClass], target_index: int
) -> str:
    """
    Borrows the name of the closest mapped enclosing class.

    For `a/Outer$Mid$Inner` the candidates are `a/Outer$Mid`, then
    `a/Outer`. The first one with a name in `target_index` is joined with
    the segments it does not cover, e.g. `b/Renamed$Mid$Inner`. Without
    any match the key comes back unchanged.
    """
    path = key.split(INNER_CLASS_SEPARATOR)
    for i in range(len(path) - 2, -1, -1):
        candidate = INNER_CLASS_SEPARATOR.join(path[: i + 1])
        match = classes.get(candidate)
        if match is None:
            continue
        enclosing_name = match.get_name(target_index)
        if enclosing_name:
            return INNER_CLASS_SEPARATOR.join([enclosing_name, *path[i + 1 :]])
    return key


def match_enclosing_class_if_needed(
    key: str,
    entry: Optional[TinyClass],
    classes: Mapping[str, TinyClass],
    common_index: int,
    namespace_count: int,
) -> Optional[TinyClass]:
    if entry is not None or INNER_CLASS_SEPARATOR not in key:
        return entry

    names = [
        key if i == common_index else match_enclosing_class(key, classes, i)
        for i in range(namespace_count)
    ]
    log.debug(f"Synthesized nested class {key} as {names}")
    return TinyClass(names=names)
