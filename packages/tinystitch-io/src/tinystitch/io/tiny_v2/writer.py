import logging
from pathlib import Path
from typing import Iterator, List

from tinystitch.spec import TinyClass, TinyFile, TinyMethod
from .escaping import ESCAPED_NAMES_PROPERTY, escape

log = logging.getLogger(__name__)


class TinyV2Writer:
    def write(self, tiny_file: TinyFile, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            for line in self.iter_lines(tiny_file):
                f.write(line)
                f.write("\n")
        log.debug(f"Wrote {len(tiny_file.classes)} classes to {path}")

    def dumps(self, tiny_file: TinyFile) -> str:
        return "".join(f"{line}\n" for line in self.iter_lines(tiny_file))

    def iter_lines(self, tiny_file: TinyFile) -> Iterator[str]:
        header = tiny_file.header
        width = len(header.namespaces)
        escape_names = ESCAPED_NAMES_PROPERTY in header.properties

        def names(values: List[str]) -> str:
            padded = list(values[:width]) + [""] * (width - len(values))
            if escape_names:
                padded = [escape(n) for n in padded]
            return "\t".join(padded)

        yield "\t".join(
            ["tiny", str(header.major_version), str(header.minor_version)]
            + header.namespaces
        )
        for key, value in header.properties.items():
            yield f"\t{key}" if value is None else f"\t{key}\t{escape(value)}"

        for cls in tiny_file.classes:
            yield from self._class_lines(cls, names)

    def _class_lines(self, cls: TinyClass, names) -> Iterator[str]:
        yield f"c\t{names(cls.names)}"
        for comment in cls.comments:
            yield f"\tc\t{escape(comment)}"

        for field in cls.fields:
            yield f"\tf\t{field.descriptor or ''}\t{names(field.names)}"
            for comment in field.comments:
                yield f"\t\tc\t{escape(comment)}"

        for method in cls.methods:
            yield from self._method_lines(method, names)

    def _method_lines(self, method: TinyMethod, names) -> Iterator[str]:
        yield f"\tm\t{method.descriptor or ''}\t{names(method.names)}"
        for comment in method.comments:
            yield f"\t\tc\t{escape(comment)}"

        for param in method.parameters:
            yield f"\t\tp\t{param.lv_index}\t{names(param.names)}"
            for comment in param.comments:
                yield f"\t\t\tc\t{escape(comment)}"

        for local in method.local_variables:
            yield (
                f"\t\tv\t{local.lv_index}\t{local.lv_start_offset}"
                f"\t{local.lv_table_index}\t{names(local.names)}"
            )
            for comment in local.comments:
                yield f"\t\t\tc\t{escape(comment)}"
