import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tinystitch.spec import (
    DuplicateNamespaceError,
    InvalidDescriptorError,
    MappingFormatError,
)
from .descriptor import TypeDescriptor, parse_descriptor, remap_descriptor
from .lines import split_lines

log = logging.getLogger(__name__)


class LineKind(str, Enum):
    CONTEXT = "CONTEXT"
    CLASS = "CLASS"
    FIELD = "FIELD"
    METHOD = "METHOD"


@dataclass(frozen=True)
class EntryTriple:
    owner: str
    name: str
    desc: str


@dataclass(frozen=True)
class TinyV1Line:
    kind: LineKind
    raw: str
    # One slot per header namespace; None marks a hole.
    names: Tuple[Optional[str], ...] = ()
    owner: Optional[str] = None
    descriptor: Optional[TypeDescriptor] = None


def _slots(columns: List[str], width: int) -> Tuple[Optional[str], ...]:
    slots: List[Optional[str]] = [None] * width
    for i, name in enumerate(columns[:width]):
        if name:
            slots[i] = name
    return tuple(slots)


class TinyV1File:
    """
    A tiny v1 file kept line by line so it can be re-emitted verbatim.

    Every row starts with its tag: `CLASS` rows hold one name per namespace,
    `FIELD` and `METHOD` rows hold the owner and descriptor (both in the
    first namespace) followed by one name per namespace. Rows that are not
    well-formed entries are kept as context lines.
    """

    def __init__(self, first_line: str, namespaces: List[str], lines: List[TinyV1Line]):
        self.first_line = first_line
        self.namespaces = namespaces
        self._lines = lines
        self._namespace_ids = {ns: i for i, ns in enumerate(namespaces)}
        self.native_namespace = namespaces[0]
        self._native_classes: Dict[str, TinyV1Line] = {}
        for line in lines:
            if line.kind == LineKind.CLASS and line.names[0] is not None:
                self._native_classes[line.names[0]] = line

    @classmethod
    def read(cls, path: Path) -> "TinyV1File":
        log.debug(f"Reading tiny v1 mappings from {path}")
        return cls.parse(path.read_text(encoding="utf-8"))

    @classmethod
    def parse(cls, content: str) -> "TinyV1File":
        raw_lines = split_lines(content)
        if not raw_lines:
            raise MappingFormatError("Invalid mapping version!")

        first_line = raw_lines[0]
        header = first_line.split("\t")
        if len(header) <= 1 or header[0] != "v1":
            raise MappingFormatError("Invalid mapping version!")

        namespaces = header[1:]
        seen = set()
        for namespace in namespaces:
            if namespace in seen:
                raise DuplicateNamespaceError(namespace)
            seen.add(namespace)

        lines = [cls._parse_line(raw, len(namespaces)) for raw in raw_lines[1:]]
        return cls(first_line, namespaces, lines)

    @staticmethod
    def _parse_line(raw: str, width: int) -> TinyV1Line:
        data = raw.split("\t")
        tag = data[0]

        if tag == "CLASS" and len(data) >= 2:
            return TinyV1Line(LineKind.CLASS, raw, names=_slots(data[1:], width))

        if tag in ("FIELD", "METHOD") and len(data) >= 4:
            try:
                descriptor = parse_descriptor(data[2])
            except InvalidDescriptorError as e:
                log.warning(f"Keeping malformed {tag} row as context: {e}")
                return TinyV1Line(LineKind.CONTEXT, raw)
            return TinyV1Line(
                LineKind(tag),
                raw,
                names=_slots(data[3:], width),
                owner=data[1],
                descriptor=descriptor,
            )

        if len(data) >= 2:
            log.debug(f"Keeping unrecognized row as context: {raw!r}")
        return TinyV1Line(LineKind.CONTEXT, raw)

    def lines(self) -> List[TinyV1Line]:
        return list(self._lines)

    def entries(self, kind: LineKind) -> List[TinyV1Line]:
        return [line for line in self._lines if line.kind == kind]

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self._namespace_ids

    def remap(self, class_name: str, namespace: str) -> str:
        line = self._native_classes.get(class_name)
        if line is not None:
            name = line.names[self._namespace_ids[namespace]]
            if name is not None:
                return name
        return class_name

    def class_name(self, line: TinyV1Line, namespace: str) -> Optional[str]:
        return line.names[self._namespace_ids[namespace]]

    def member(self, line: TinyV1Line, namespace: str) -> Optional[EntryTriple]:
        """
        The field or method of `line` as seen from `namespace`: owner and
        descriptor are remapped through this file's class table, and a hole
        in that namespace yields None.
        """
        if line.owner is None or line.descriptor is None:
            raise ValueError(f"Not a field or method row: {line.raw!r}")
        if namespace == self.native_namespace:
            return EntryTriple(line.owner, line.names[0] or "", line.descriptor.text)

        name = line.names[self._namespace_ids[namespace]]
        if name is None:
            return None

        def remap_class(class_name: str) -> str:
            return self.remap(class_name, namespace)

        return EntryTriple(
            remap_class(line.owner),
            name,
            remap_descriptor(line.descriptor, remap_class),
        )
