"""Phases of the focus cycle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PhaseKind = Literal["idle", "focus", "rest", "long_rest", "paused"]
PhaseCategory = Literal["idle", "focus", "rest", "long_rest"]


@dataclass(frozen=True)
class Phase:
    """A stage of the focus cycle.

    ``index`` is the focus session number for ``focus`` and the number of the
    session a ``rest`` follows. A ``paused`` phase carries the phase it wraps
    in ``base``; pauses never nest.
    """

    kind: PhaseKind
    index: int = 0
    base: Phase | None = None

    def __post_init__(self) -> None:
        if self.kind == "paused":
            if self.base is None:
                raise ValueError("Paused phase requires a base phase")
            if self.base.kind == "paused":
                raise ValueError("Paused phase cannot wrap another paused phase")
        elif self.base is not None:
            raise ValueError(f"Only paused phases carry a base, got {self.kind}")

        if self.kind in ("focus", "rest"):
            if self.index < 1:
                raise ValueError(f"{self.kind} index must be >= 1, got {self.index}")
        elif self.index != 0:
            raise ValueError(f"{self.kind} phase takes no index")

    # Constructors

    @classmethod
    def idle(cls) -> Phase:
        return cls("idle")

    @classmethod
    def focus(cls, index: int) -> Phase:
        return cls("focus", index)

    @classmethod
    def rest(cls, after_index: int) -> Phase:
        return cls("rest", after_index)

    @classmethod
    def long_rest(cls) -> Phase:
        return cls("long_rest")

    @classmethod
    def paused(cls, base: Phase) -> Phase:
        return cls("paused", base=base)

    # Queries

    @property
    def is_idle(self) -> bool:
        return self.kind == "idle"

    @property
    def is_paused(self) -> bool:
        return self.kind == "paused"

    @property
    def is_running(self) -> bool:
        """True for a phase whose countdown is live."""
        return self.kind not in ("idle", "paused")

    @property
    def base_phase(self) -> Phase:
        """The phase itself, or the wrapped phase when paused."""
        if self.base is not None:
            return self.base
        return self

    @property
    def category(self) -> PhaseCategory:
        """Coarse category with pauses unwrapped."""
        return self.base_phase.kind  # type: ignore[return-value]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.kind]

    def __str__(self) -> str:
        if self.kind == "paused":
            return f"Paused({self.base})"
        if self.kind in ("focus", "rest"):
            return f"{self.kind.capitalize()}({self.index})"
        if self.kind == "long_rest":
            return "LongRest"
        return "Idle"


_DISPLAY_NAMES: dict[str, str] = {
    "idle": "Idle",
    "focus": "Focus",
    "rest": "Rest",
    "long_rest": "Long Rest",
    "paused": "Paused",
}

IDLE = Phase.idle()
LONG_REST = Phase.long_rest()
