"""Output sinks for payment and exchange-rate messages.

Every payment behavior and exchange subscriber reports through a sink instead
of printing directly. Implementations live in ``payfx.notifiers.console``:
``ConsoleNotifier`` writes lines to a stream and ``MemoryNotifier`` collects
them in a list.
"""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Destination for one-line, human-readable messages."""

    @abstractmethod
    def send(self, text: str) -> None:
        """Deliver ``text`` as a single message."""
        pass


__all__ = ["Notifier"]
