import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from tinystitch.spec import (
    MappingFormatError,
    TinyClass,
    TinyField,
    TinyFile,
    TinyHeader,
    TinyLocalVariable,
    TinyMethod,
    TinyMethodParameter,
)
from ..lines import split_lines
from .escaping import ESCAPED_NAMES_PROPERTY, unescape

log = logging.getLogger(__name__)

SUPPORTED_MAJOR_VERSION = 2


def _parse_int(value: str, line_no: int) -> int:
    try:
        return int(value)
    except ValueError:
        raise MappingFormatError(f"Line {line_no}: expected an integer, got '{value}'")


def _names(raw: List[str], escaped: bool) -> List[str]:
    return [unescape(n) for n in raw] if escaped else list(raw)


def _require(parts: List[str], count: int, line_no: int) -> None:
    if len(parts) < count:
        raise MappingFormatError(
            f"Line {line_no}: expected at least {count} columns, got {len(parts)}"
        )


class TinyV2Reader:
    """
    Reads the tab-indented tiny v2 format into a TinyFile tree.

    Nesting is given by the number of leading tabs: classes at depth 0,
    fields and methods at depth 1, parameters and local variables at
    depth 2. A `c` section deeper than 0 is a comment on its parent.
    """

    def read(self, path: Path) -> TinyFile:
        log.debug(f"Reading tiny v2 mappings from {path}")
        return self.parse(path.read_text(encoding="utf-8"))

    def parse(self, content: str) -> TinyFile:
        lines = split_lines(content)
        if not lines:
            raise MappingFormatError("Empty mapping file")

        header = self._parse_header(lines[0])
        classes: List[TinyClass] = []

        escaped_names = False
        current_class: Optional[TinyClass] = None
        current_member: Optional[Union[TinyField, TinyMethod]] = None
        current_variable: Optional[Union[TinyMethodParameter, TinyLocalVariable]] = None

        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            depth = len(line) - len(line.lstrip("\t"))
            parts = line[depth:].split("\t")
            section = parts[0]

            if current_class is None and depth == 1:
                value = unescape(parts[1]) if len(parts) > 1 else None
                header.properties[section] = value
                if section == ESCAPED_NAMES_PROPERTY:
                    escaped_names = True
                continue

            if depth == 0 and section == "c":
                current_class = TinyClass(names=_names(parts[1:], escaped_names))
                classes.append(current_class)
                current_member = None
                current_variable = None
            elif depth == 1 and current_class is not None:
                if section == "c":
                    _require(parts, 2, line_no)
                    current_class.comments.append(unescape(parts[1]))
                elif section == "f":
                    _require(parts, 2, line_no)
                    current_member = TinyField(
                        descriptor=parts[1], names=_names(parts[2:], escaped_names)
                    )
                    current_class.fields.append(current_member)
                elif section == "m":
                    _require(parts, 2, line_no)
                    current_member = TinyMethod(
                        descriptor=parts[1], names=_names(parts[2:], escaped_names)
                    )
                    current_class.methods.append(current_member)
                else:
                    self._skip(line_no, section)
                    continue
                current_variable = None
            elif depth == 2 and current_member is not None:
                if section == "c":
                    _require(parts, 2, line_no)
                    current_member.comments.append(unescape(parts[1]))
                elif section == "p" and isinstance(current_member, TinyMethod):
                    _require(parts, 2, line_no)
                    current_variable = TinyMethodParameter(
                        lv_index=_parse_int(parts[1], line_no),
                        names=_names(parts[2:], escaped_names),
                    )
                    current_member.parameters.append(current_variable)
                elif section == "v" and isinstance(current_member, TinyMethod):
                    _require(parts, 4, line_no)
                    current_variable = TinyLocalVariable(
                        lv_index=_parse_int(parts[1], line_no),
                        lv_start_offset=_parse_int(parts[2], line_no),
                        lv_table_index=_parse_int(parts[3], line_no),
                        names=_names(parts[4:], escaped_names),
                    )
                    current_member.local_variables.append(current_variable)
                else:
                    self._skip(line_no, section)
            elif depth == 3 and current_variable is not None and section == "c":
                _require(parts, 2, line_no)
                current_variable.comments.append(unescape(parts[1]))
            else:
                self._skip(line_no, section)

        return TinyFile(header=header, classes=classes)

    def _parse_header(self, line: str) -> TinyHeader:
        parts = line.split("\t")
        if len(parts) < 4 or parts[0] != "tiny":
            raise MappingFormatError(f"Invalid tiny v2 header: '{line}'")

        major = _parse_int(parts[1], 1)
        minor = _parse_int(parts[2], 1)
        if major != SUPPORTED_MAJOR_VERSION:
            raise MappingFormatError(f"Unsupported tiny major version {major}")

        properties: Dict[str, Optional[str]] = {}
        header = TinyHeader(
            namespaces=parts[3:],
            major_version=major,
            minor_version=minor,
            properties=properties,
        )
        return header.validate()

    def _skip(self, line_no: int, section: str) -> None:
        log.debug(f"Line {line_no}: skipping unsupported section '{section}'")
