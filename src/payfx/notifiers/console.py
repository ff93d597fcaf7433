"""Stream-backed and list-backed sinks."""

import logging
import sys
from typing import List, Optional, TextIO

from payfx.notifiers import Notifier

logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):
    """Writes each message as one line to a text stream.

    When no stream is given, ``sys.stdout`` is looked up on every send so
    that redirection (and pytest's capsys) is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def send(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()
        logger.debug(f"Console message written: {len(text)} chars")


class MemoryNotifier(Notifier):
    """Collects messages in order so callers can inspect what was reported.

    Shared by every behavior and subscriber of a demo run, ``messages`` is the
    full transcript of that run.
    """

    def __init__(self):
        self.messages: List[str] = []

    def send(self, text: str) -> None:
        self.messages.append(text)
        logger.debug(f"Captured message #{len(self.messages)}")

    def clear(self) -> None:
        self.messages.clear()

    def get_messages(self) -> List[str]:
        """Copy of the transcript; mutating it leaves the notifier untouched."""
        return list(self.messages)

    def has_message_containing(self, substring: str) -> bool:
        return any(substring in msg for msg in self.messages)

    def __len__(self) -> int:
        return len(self.messages)


__all__ = ["ConsoleNotifier", "MemoryNotifier"]
