from tinystitch.spec import MappingFormatError

ESCAPED_NAMES_PROPERTY = "escaped-names"

_TO_ESCAPE = {"\\": "\\", "\n": "n", "\r": "r", "\t": "t", "\0": "0"}
_FROM_ESCAPE = {v: k for k, v in _TO_ESCAPE.items()}


def escape(value: str) -> str:
    if not any(ch in _TO_ESCAPE for ch in value):
        return value
    return "".join(f"\\{_TO_ESCAPE[ch]}" if ch in _TO_ESCAPE else ch for ch in value)


def unescape(value: str) -> str:
    if "\\" not in value:
        return value

    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(value) or value[i + 1] not in _FROM_ESCAPE:
            raise MappingFormatError(f"Invalid escape sequence in '{value}'")
        out.append(_FROM_ESCAPE[value[i + 1]])
        i += 2
    return "".join(out)
