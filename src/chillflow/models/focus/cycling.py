"""Focus cycle state machine with a drift-free countdown.

The engine never decrements a counter. Remaining time is always derived from
the instant the current countdown began and the ``now`` handed to each call,
so late or missed ticks are corrected on the next one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from chillflow.models.config_models import CycleConfig

from .exceptions import InvalidPhaseOperationError
from .phase import IDLE, LONG_REST, Phase, PhaseCategory

logger = logging.getLogger(__name__)

FocusSink = Callable[[int, datetime], object]
PhaseListener = Callable[[Phase, PhaseCategory], None]


class CycleEngine:
    """Owns the phase of a focus cycle and its countdown.

    Callers drive the engine by calling :meth:`tick` at a fixed cadence with
    the current wall-clock time. Operations that make no sense in the current
    phase are ignored, except :meth:`skip` while paused, which raises.
    """

    def __init__(
        self,
        config: CycleConfig | None = None,
        on_focus_completed: FocusSink | None = None,
    ):
        self.config = config or CycleConfig()
        self._on_focus_completed = on_focus_completed
        self._listeners: list[PhaseListener] = []

        self._phase: Phase = IDLE
        self._remaining_seconds: float = 0.0
        self._phase_total_seconds: float = 0.0
        self._start_instant: datetime | None = None
        self._saved_remaining_seconds: float | None = None
        self._focus_index = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> float:
        return self._remaining_seconds

    @property
    def phase_total_seconds(self) -> float:
        """Baseline of the running countdown (shorter after a resume)."""
        return self._phase_total_seconds

    @property
    def start_instant(self) -> datetime | None:
        return self._start_instant

    @property
    def saved_remaining_seconds(self) -> float | None:
        return self._saved_remaining_seconds

    @property
    def focus_index(self) -> int:
        return self._focus_index

    @property
    def is_running(self) -> bool:
        return self._phase.is_running

    @property
    def cycle_label(self) -> str:
        """Position in the cycle, e.g. ``"2/3"``, for focus and rest phases."""
        base = self._phase.base_phase
        if base.kind in ("focus", "rest"):
            return f"{base.index}/{self.config.max_sessions}"
        return ""

    def total_seconds_of(self, phase: Phase) -> int:
        """Full configured duration of a phase (pauses unwrapped)."""
        kind = phase.base_phase.kind
        if kind == "focus":
            return self.config.focus_duration
        if kind == "rest":
            return self.config.rest_duration
        if kind == "long_rest":
            return self.config.long_rest_duration
        return 0

    def subscribe(self, listener: PhaseListener) -> Callable[[], None]:
        """Register a phase-change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def start(self, now: datetime | None = None) -> None:
        """Enter the first focus session. Ignored unless idle."""
        if not self._phase.is_idle:
            return
        now = now or datetime.now()
        self._focus_index = 1
        self._begin(Phase.focus(1), self.config.focus_duration, now)

    def tick(self, now: datetime) -> None:
        """Recompute remaining time and fire any completions that are due.

        A single tick can span several phase boundaries (for example after the
        machine slept through a rest). Each following phase starts at the
        instant its predecessor ended.
        """
        while self._phase.is_running:
            self._remaining_seconds = self._remaining_at(now)
            if self._remaining_seconds > 0:
                return
            completed_at = self._start_instant + timedelta(
                seconds=self._phase_total_seconds
            )
            self._complete(completed_at)

    def pause(self, now: datetime) -> None:
        """Freeze the countdown. Ignored unless running."""
        if not self._phase.is_running:
            return
        self._saved_remaining_seconds = self._remaining_at(now)
        self._remaining_seconds = self._saved_remaining_seconds
        self._start_instant = None
        self._set_phase(Phase.paused(self._phase))

    def resume(self, now: datetime) -> None:
        """Continue a paused countdown from where it stopped. Ignored unless paused."""
        if not self._phase.is_paused:
            return
        base = self._phase.base_phase
        saved = self._saved_remaining_seconds or 0.0
        self._begin(base, saved, now)

    def skip(self, now: datetime | None = None) -> None:
        """Move to the next phase immediately without recording a session.

        Raises:
            InvalidPhaseOperationError: If the cycle is paused.
        """
        if self._phase.is_paused:
            raise InvalidPhaseOperationError("skip", self._phase)
        if self._phase.is_idle:
            return
        logger.debug("skipping %s", self._phase)
        self._advance(now or datetime.now())

    def reset(self) -> None:
        """Return to idle from any phase."""
        self._focus_index = 0
        self._remaining_seconds = 0.0
        self._phase_total_seconds = 0.0
        self._start_instant = None
        self._saved_remaining_seconds = None
        self._set_phase(IDLE)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _remaining_at(self, now: datetime) -> float:
        elapsed = (now - self._start_instant).total_seconds()
        remaining = self._phase_total_seconds - elapsed
        return min(self._phase_total_seconds, max(0.0, remaining))

    def _complete(self, completed_at: datetime) -> None:
        phase = self._phase
        logger.debug("%s completed at %s", phase, completed_at.isoformat())
        if phase.kind == "focus" and self._on_focus_completed is not None:
            self._on_focus_completed(self.config.focus_duration, completed_at)
        self._advance(completed_at)

    def _advance(self, at: datetime) -> None:
        phase = self._phase
        max_sessions = self.config.max_sessions

        if phase.kind == "focus":
            if phase.index < max_sessions:
                self._begin(Phase.rest(phase.index), self.config.rest_duration, at)
            else:
                self._begin(LONG_REST, self.config.long_rest_duration, at)
        elif phase.kind == "rest":
            next_index = phase.index + 1
            if next_index <= max_sessions:
                self._focus_index = next_index
                self._begin(Phase.focus(next_index), self.config.focus_duration, at)
            else:
                self._begin(LONG_REST, self.config.long_rest_duration, at)
        elif phase.kind == "long_rest":
            self.reset()

    def _begin(self, phase: Phase, total_seconds: float, at: datetime) -> None:
        self._phase_total_seconds = float(total_seconds)
        self._remaining_seconds = float(total_seconds)
        self._start_instant = at
        self._saved_remaining_seconds = None
        self._set_phase(phase)

    def _set_phase(self, phase: Phase) -> None:
        previous = self._phase
        if phase == previous:
            return
        self._phase = phase
        logger.debug("phase %s -> %s", previous, phase)
        for listener in list(self._listeners):
            try:
                listener(phase, previous.category)
            except Exception:
                logger.exception("phase listener failed on %s -> %s", previous, phase)
