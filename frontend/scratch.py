# frontend/scratch.py

from typing import Dict, MutableMapping, Optional, Protocol

# Browsers typically allow about 5 MB of sessionStorage per origin.
DEFAULT_CAPACITY_BYTES = 5 * 1024 * 1024


class ScratchFullError(Exception):
    """A write would exceed the scratch space capacity."""


class SessionScratch(Protocol):
    def set(self, key: str, value: str) -> None: ...

    def get(self, key: str) -> Optional[str]: ...

    def remove(self, key: str) -> None: ...


def _size(value: str) -> int:
    # sessionStorage counts UTF-16 code units.
    return len(value) * 2


class _BoundedScratch:
    def __init__(self, capacity_bytes: int = DEFAULT_CAPACITY_BYTES):
        self.capacity_bytes = capacity_bytes

    def _entries(self) -> MutableMapping[str, str]:
        raise NotImplementedError

    def used_bytes(self) -> int:
        return sum(_size(k) + _size(v) for k, v in self._entries().items())

    def set(self, key: str, value: str) -> None:
        entries = self._entries()
        current = entries.get(key)
        freed = _size(key) + _size(current) if current is not None else 0
        needed = _size(key) + _size(value)
        if self.used_bytes() - freed + needed > self.capacity_bytes:
            raise ScratchFullError(
                f"Writing {key!r} needs {needed} bytes; capacity is {self.capacity_bytes} bytes."
            )
        entries[key] = value

    def get(self, key: str) -> Optional[str]:
        return self._entries().get(key)

    def remove(self, key: str) -> None:
        self._entries().pop(key, None)


class MemoryScratch(_BoundedScratch):
    """Plain dict scratch space; used by tests and scripts."""

    def __init__(self, capacity_bytes: int = DEFAULT_CAPACITY_BYTES):
        super().__init__(capacity_bytes)
        self.data: Dict[str, str] = {}

    def _entries(self) -> MutableMapping[str, str]:
        return self.data


class StreamlitSessionScratch(_BoundedScratch):
    """
    Scratch space kept inside Streamlit's per-browser-session state.

    Entries live under one namespace key so they never collide with widget state,
    and vanish when the browser session ends.
    """

    NAMESPACE = "_session_scratch"

    def __init__(self, session_state: MutableMapping, capacity_bytes: int = DEFAULT_CAPACITY_BYTES):
        super().__init__(capacity_bytes)
        self._state = session_state

    def _entries(self) -> MutableMapping[str, str]:
        if self.NAMESPACE not in self._state:
            self._state[self.NAMESPACE] = {}
        return self._state[self.NAMESPACE]
