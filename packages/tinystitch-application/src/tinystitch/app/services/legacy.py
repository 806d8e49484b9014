import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tinystitch.io import EntryTriple, LineKind, TinyV1File, TinyV1Line
from tinystitch.spec import CommonNamespaceHoleError, NoAdditionalNamespacesError
from .enclosing import INNER_CLASS_SEPARATOR
from .namespaces import resolve_common_namespace

log = logging.getLogger(__name__)


class LegacyMerger:
    """
    Appends the namespaces B has and A lacks to every row of a tiny v1
    file A, joining rows on their name in the shared namespace.

    A's rows, including comments and unrecognized rows, are re-emitted
    verbatim and in order; only new columns are added.
    """

    def merge(
        self,
        input_a: Path,
        input_b: Path,
        output: Path,
        common_namespace: Optional[str] = None,
        leave_holes: bool = False,
    ) -> List[str]:
        file_a = TinyV1File.read(input_a)
        file_b = TinyV1File.read(input_b)
        lines, extra_namespaces = self.merge_files(
            file_a, file_b, common_namespace, leave_holes
        )

        # Exclusive create: an existing output is never overwritten.
        with output.open("x", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        return extra_namespaces

    def merge_files(
        self,
        file_a: TinyV1File,
        file_b: TinyV1File,
        common_namespace: Optional[str] = None,
        leave_holes: bool = False,
    ) -> Tuple[List[str], List[str]]:
        common = resolve_common_namespace(
            file_a.namespaces, file_b.namespaces, common_namespace
        )

        classes_b: Dict[str, TinyV1Line] = {}
        for line in file_b.entries(LineKind.CLASS):
            name = file_b.class_name(line, common)
            if name is None:
                raise CommonNamespaceHoleError(common, "B")
            classes_b[name] = line
        fields_b = self._index_members(file_b, LineKind.FIELD, common)
        methods_b = self._index_members(file_b, LineKind.METHOD, common)

        extra_namespaces = [
            ns for ns in file_b.namespaces if not file_a.has_namespace(ns)
        ]
        if not extra_namespaces:
            raise NoAdditionalNamespacesError()
        log.debug(f"Appending namespaces {extra_namespaces} joined on '{common}'")

        lines = [file_a.first_line + "".join(f"\t{ns}" for ns in extra_namespaces)]
        for line in file_a.lines():
            if line.kind == LineKind.CONTEXT:
                lines.append(line.raw)
                continue

            if line.kind == LineKind.CLASS:
                shared = file_a.class_name(line, common)
                if shared is None:
                    raise CommonNamespaceHoleError(common, "A")
                columns = [
                    self._class_column(shared, ns, classes_b, file_b, leave_holes)
                    for ns in extra_namespaces
                ]
            else:
                triple = file_a.member(line, common)
                if triple is None:
                    raise CommonNamespaceHoleError(common, "A")
                members_b = fields_b if line.kind == LineKind.FIELD else methods_b
                columns = [
                    self._member_column(triple, ns, members_b, file_b, leave_holes)
                    for ns in extra_namespaces
                ]
            lines.append(line.raw + "".join(f"\t{c}" for c in columns))

        return lines, extra_namespaces

    def _index_members(
        self, tiny_file: TinyV1File, kind: LineKind, common: str
    ) -> Dict[EntryTriple, TinyV1Line]:
        members: Dict[EntryTriple, TinyV1Line] = {}
        for line in tiny_file.entries(kind):
            triple = tiny_file.member(line, common)
            if triple is None:
                raise CommonNamespaceHoleError(common, "B")
            members[triple] = line
        return members

    def _class_column(
        self,
        shared: str,
        namespace: str,
        classes_b: Dict[str, TinyV1Line],
        file_b: TinyV1File,
        leave_holes: bool,
    ) -> str:
        entry = classes_b.get(shared)
        if entry is not None:
            return file_b.class_name(entry, namespace) or ""
        if leave_holes:
            return ""

        split = shared.rfind(INNER_CLASS_SEPARATOR)
        if split <= 0:
            return shared

        # Walk outwards until an enclosing class of B is found.
        start, end = shared[:split], shared[split + 1 :]
        partial = classes_b.get(start)
        while partial is None:
            split = start.rfind(INNER_CLASS_SEPARATOR)
            if split < 1:
                return shared
            end = f"{start[split + 1 :]}{INNER_CLASS_SEPARATOR}{end}"
            start = start[:split]
            partial = classes_b.get(start)

        partial_name = file_b.class_name(partial, namespace)
        if partial_name is None:
            return ""
        return f"{partial_name}{INNER_CLASS_SEPARATOR}{end}"

    def _member_column(
        self,
        triple: EntryTriple,
        namespace: str,
        members_b: Dict[EntryTriple, TinyV1Line],
        file_b: TinyV1File,
        leave_holes: bool,
    ) -> str:
        entry = members_b.get(triple)
        if entry is not None:
            match = file_b.member(entry, namespace)
            return match.name if match is not None else ""
        return "" if leave_holes else triple.name
