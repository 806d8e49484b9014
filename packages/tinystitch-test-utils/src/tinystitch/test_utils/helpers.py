from typing import List

from tinystitch.spec import TinyClass, TinyFile, TinyHeader


def tiny_file(namespaces: List[str], *classes: TinyClass) -> TinyFile:
    return TinyFile(
        header=TinyHeader(namespaces=list(namespaces)), classes=list(classes)
    )


def tiny_v2_lines(namespaces: List[str], *rows: str) -> List[str]:
    """Builds a tiny v2 document as a list of lines, header first."""
    return ["\t".join(["tiny", "2", "0", *namespaces]), *rows]
