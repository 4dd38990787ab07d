"""Focus cycle and session statistics for ChillFlow."""

from .analytics import RecordResult, StatsAggregator, WeeklyStats
from .cycling import CycleEngine
from .exceptions import ChillFlowError, InvalidPhaseOperationError, StorageError
from .history import FocusRecord
from .notifications import AudioCue, audio_cue_for
from .phase import Phase, PhaseCategory
from .storage import FileStore, KeyValueStore, MemoryStore

__all__ = [
    "AudioCue",
    "ChillFlowError",
    "CycleEngine",
    "FileStore",
    "FocusRecord",
    "InvalidPhaseOperationError",
    "KeyValueStore",
    "MemoryStore",
    "Phase",
    "PhaseCategory",
    "RecordResult",
    "StatsAggregator",
    "StorageError",
    "WeeklyStats",
    "audio_cue_for",
]
