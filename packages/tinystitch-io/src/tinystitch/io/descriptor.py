from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from tinystitch.spec import InvalidDescriptorError

PRIMITIVE_CODES = "ZCBSIFJD"
VOID_CODE = "V"


class DescriptorKind(str, Enum):
    PRIMITIVE = "PRIMITIVE"  # includes the void return type
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"
    METHOD = "METHOD"


@dataclass(frozen=True)
class TypeDescriptor:
    kind: DescriptorKind
    text: str
    internal_name: Optional[str] = None  # OBJECT
    element: Optional["TypeDescriptor"] = None  # ARRAY
    dimensions: int = 0  # ARRAY
    arguments: Tuple["TypeDescriptor", ...] = ()  # METHOD
    return_type: Optional["TypeDescriptor"] = None  # METHOD

    @property
    def is_void(self) -> bool:
        return self.kind == DescriptorKind.PRIMITIVE and self.text == VOID_CODE


def _parse_value(
    text: str, pos: int, allow_void: bool = False
) -> Tuple[TypeDescriptor, int]:
    if pos >= len(text):
        raise InvalidDescriptorError(text, pos)

    code = text[pos]
    if code in PRIMITIVE_CODES or (allow_void and code == VOID_CODE):
        return TypeDescriptor(DescriptorKind.PRIMITIVE, code), pos + 1

    if code == "[":
        start = pos
        while start < len(text) and text[start] == "[":
            start += 1
        element, end = _parse_value(text, start)
        return (
            TypeDescriptor(
                DescriptorKind.ARRAY,
                text[pos:end],
                element=element,
                dimensions=start - pos,
            ),
            end,
        )

    if code == "L":
        semicolon = text.find(";", pos)
        if semicolon <= pos + 1:
            raise InvalidDescriptorError(text, pos)
        return (
            TypeDescriptor(
                DescriptorKind.OBJECT,
                text[pos : semicolon + 1],
                internal_name=text[pos + 1 : semicolon],
            ),
            semicolon + 1,
        )

    raise InvalidDescriptorError(text, pos)


def parse_descriptor(text: str) -> TypeDescriptor:
    """
    Parses a JVM field or method descriptor into a TypeDescriptor tree.

    Raises:
        InvalidDescriptorError: If the text is not a complete descriptor.
    """
    if text.startswith("("):
        pos = 1
        arguments = []
        while pos < len(text) and text[pos] != ")":
            argument, pos = _parse_value(text, pos)
            arguments.append(argument)
        if pos >= len(text):
            raise InvalidDescriptorError(text, pos)
        return_type, end = _parse_value(text, pos + 1, allow_void=True)
        if end != len(text):
            raise InvalidDescriptorError(text, end)
        return TypeDescriptor(
            DescriptorKind.METHOD,
            text,
            arguments=tuple(arguments),
            return_type=return_type,
        )

    descriptor, end = _parse_value(text, 0)
    if end != len(text):
        raise InvalidDescriptorError(text, end)
    return descriptor


def remap_descriptor(
    descriptor: TypeDescriptor, remap_class: Callable[[str], str]
) -> str:
    """
    Rewrites every class reference inside `descriptor` through `remap_class`,
    which maps an internal class name to its name in the target namespace.
    """
    if descriptor.kind == DescriptorKind.ARRAY:
        if descriptor.element is None:
            raise InvalidDescriptorError(descriptor.text)
        return "[" * descriptor.dimensions + remap_descriptor(
            descriptor.element, remap_class
        )

    if descriptor.kind == DescriptorKind.OBJECT:
        if descriptor.internal_name is None:
            raise InvalidDescriptorError(descriptor.text)
        return f"L{remap_class(descriptor.internal_name)};"

    if descriptor.kind == DescriptorKind.METHOD:
        if descriptor.text == "()V":
            return "()V"
        args = "".join(remap_descriptor(a, remap_class) for a in descriptor.arguments)
        if descriptor.return_type is None:
            raise InvalidDescriptorError(descriptor.text)
        if descriptor.return_type.is_void:
            return f"({args})V"
        return f"({args}){remap_descriptor(descriptor.return_type, remap_class)}"

    return descriptor.text
