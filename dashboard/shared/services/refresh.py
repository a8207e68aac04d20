"""Stale-response guard for filter-driven refetches."""

from __future__ import annotations

import threading
from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationToken:
    generation: int
    selection: Hashable


class SelectionGeneration:
    """Monotonic generation counter keyed to the current filter selection.

    Each fetch starts with ``begin(selection)``; when its response arrives,
    ``is_current(token)`` tells whether a newer selection has been made in
    the meantime, in which case the response must be dropped.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0
        self._selection: Hashable = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def selection(self) -> Hashable:
        return self._selection

    def begin(self, selection: Hashable) -> GenerationToken:
        """Register a new selection and return the token for its fetch."""
        with self._lock:
            self._generation += 1
            self._selection = selection
            return GenerationToken(self._generation, selection)

    def is_current(self, token: GenerationToken) -> bool:
        with self._lock:
            return token.generation == self._generation
