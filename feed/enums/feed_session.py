"""Feed session enumerations."""

from enum import Enum


class FeedState(str, Enum):
    """Lifecycle of one feed screen session.

    Refreshing and loading more are flags layered on top of READY.
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class HapticPattern(str, Enum):
    """Vibration strength requested from the device."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

    @property
    def duration_ms(self) -> int:
        """Vibration duration for this pattern in milliseconds."""
        return {"light": 10, "medium": 20, "heavy": 30}[self.value]
