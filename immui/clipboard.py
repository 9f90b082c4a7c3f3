"""Clipboard access used by text widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClipboardObject(ABC):
    """Somewhere to copy text to and paste it from."""

    @abstractmethod
    def get(self) -> str | None:
        """The clipboard text, or None if it cannot be read."""

    @abstractmethod
    def set(self, data: str) -> None:
        """Replace the clipboard text."""


class LocalClipboard(ClipboardObject):
    """A clipboard kept in memory."""

    def __init__(self) -> None:
        self._data = ""

    def get(self) -> str | None:
        return self._data

    def set(self, data: str) -> None:
        self._data = data