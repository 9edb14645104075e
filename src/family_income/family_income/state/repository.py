from __future__ import annotations

from typing import Optional, Protocol

from .model import AppState


class StateRepository(Protocol):
    def load(self) -> Optional[AppState]:
        """Return the stored state, or None when nothing was saved yet."""

        raise NotImplementedError

    def save(self, state: AppState) -> None:
        """Replace the stored state as a whole."""

        raise NotImplementedError
