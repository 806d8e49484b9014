from typing import List


def split_lines(content: str) -> List[str]:
    """
    Splits mapping text on LF only, dropping a trailing CR per line.

    `str.splitlines` also breaks on form feeds, U+2028 and other separators
    that may legitimately appear inside names, comments and context rows.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
