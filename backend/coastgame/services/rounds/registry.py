import random
import string
import threading
from typing import Dict, Optional

from .engine import RoundHandle


def generate_round_code(length=6):
    """Generate a short, human-friendly round code."""
    return ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))


class RoundRegistry:
    """In-memory map of round codes to live round handles."""

    def __init__(self) -> None:
        self._rounds: Dict[str, RoundHandle] = {}
        self._lock = threading.Lock()

    def add(self, handle: RoundHandle) -> str:
        with self._lock:
            while True:
                code = generate_round_code()
                if code not in self._rounds:
                    break
            self._rounds[code] = handle
        return code

    def get(self, code: str) -> Optional[RoundHandle]:
        return self._rounds.get((code or '').upper())

    def drop(self, code: str) -> Optional[RoundHandle]:
        with self._lock:
            return self._rounds.pop((code or '').upper(), None)

    def discard(self, code: str, handle: RoundHandle) -> bool:
        """Drop ``code`` only while it still maps to ``handle``.

        Expiry timers use this so a stale timer never removes a newer round
        that was handed the same code.
        """
        with self._lock:
            code = (code or '').upper()
            if self._rounds.get(code) is not handle:
                return False
            del self._rounds[code]
            return True
