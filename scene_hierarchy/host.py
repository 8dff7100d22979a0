"""Host wiring: print the hierarchy on session start or on demand."""

from __future__ import annotations

from .hierarchy.printer import print_hierarchy
from .models import PrinterSettings
from .utils.sinks import PrintSink


class HierarchyScript:
    """Binds a scene and an output sink to a no-argument print entry point.

    The host calls ``on_start()`` once when the session starts; other code can
    call ``print_hierarchy()`` at any time.
    """

    def __init__(self, scene, settings: PrinterSettings | None = None, sink=None):
        self.scene = scene
        self.settings = settings or PrinterSettings()
        self.sink = sink if sink is not None else PrintSink()

    def print_hierarchy(self) -> None:
        print_hierarchy(self.scene, self.sink, self.settings)

    def on_start(self) -> bool:
        """Print if ``print_on_start`` is set. Returns True when something was printed."""
        if not self.settings.print_on_start:
            return False
        self.print_hierarchy()
        return True
