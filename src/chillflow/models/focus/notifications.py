"""Phase-change cues for the audio layer."""

from typing import Literal

from .phase import Phase, PhaseCategory

AudioCue = Literal["play", "stop"]

_CUES: dict[tuple[str, str], AudioCue] = {
    ("idle", "focus"): "play",
    ("rest", "focus"): "play",
    ("focus", "rest"): "stop",
    ("focus", "long_rest"): "stop",
}


def audio_cue_for(previous: PhaseCategory, phase: Phase) -> AudioCue | None:
    """
    Decide what the audio layer should do after a phase change.

    Pausing and resuming keep the same category on both sides, so they never
    produce a cue. Leaving a long rest is silent as well.
    """
    return _CUES.get((previous, phase.category))
