"""Console adapter for customer notices."""

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class ConsoleNotifier:
    """Write advisory notices to a text stream (stdout by default)."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def notify(self, message: str) -> None:
        print(message, file=self.stream)
