"""MenuSearch Preferences - Liked/Disliked Record State.

Preference persistence lives outside the engine. The engine only asks a
provider for the state of a record id.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)


class PreferenceState(Enum):
    """User preference for a record."""

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


class PreferenceProvider(ABC):
    """Source of per-record preference state."""

    @abstractmethod
    def get_state(self, record_id: str) -> PreferenceState:
        """Get the preference for a record (NEUTRAL when unknown)."""
        pass


class StaticPreferenceProvider(PreferenceProvider):
    """Dict-backed preference provider."""

    def __init__(self, states: Optional[Mapping[str, Union[PreferenceState, str]]] = None):
        self._states: Dict[str, PreferenceState] = {}
        for record_id, state in (states or {}).items():
            self.set_state(record_id, state)

    def set_state(self, record_id: str, state: Union[PreferenceState, str]) -> None:
        """Set the preference for a record.

        Raises:
            ValueError: If ``state`` is not a known preference value
        """
        state = PreferenceState(state)
        if state is PreferenceState.NEUTRAL:
            self._states.pop(record_id, None)
        else:
            self._states[record_id] = state

    def get_state(self, record_id: str) -> PreferenceState:
        return self._states.get(record_id, PreferenceState.NEUTRAL)

    def toggle_like(self, record_id: str) -> PreferenceState:
        """Cycle a record between LIKED and NEUTRAL."""
        if self.get_state(record_id) is PreferenceState.LIKED:
            self.set_state(record_id, PreferenceState.NEUTRAL)
        else:
            self.set_state(record_id, PreferenceState.LIKED)
        return self.get_state(record_id)

    def toggle_dislike(self, record_id: str) -> PreferenceState:
        """Cycle a record between DISLIKED and NEUTRAL."""
        if self.get_state(record_id) is PreferenceState.DISLIKED:
            self.set_state(record_id, PreferenceState.NEUTRAL)
        else:
            self.set_state(record_id, PreferenceState.DISLIKED)
        return self.get_state(record_id)

    def __len__(self) -> int:
        return len(self._states)


__all__ = [
    "PreferenceState",
    "PreferenceProvider",
    "StaticPreferenceProvider",
]
