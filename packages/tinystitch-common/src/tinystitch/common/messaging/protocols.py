from typing import Protocol


class Renderer(Protocol):
    """
    Presents a fully formatted message to the user.
    """

    def render(self, message: str, level: str) -> None:
        """
        Args:
            message: The resolved and formatted string.
            level: One of "debug", "info", "success", "warning", "error".
        """
        ...
