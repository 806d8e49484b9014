__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from pathlib import Path

from tinystitch.needle import needle
from .messaging.bus import MessageBus

# Packaged messages sit below the project root so project overrides win.
needle.add_root(Path(__file__).parent / "assets")

bus = MessageBus(catalog=needle)

__all__ = ["bus", "needle", "MessageBus"]
