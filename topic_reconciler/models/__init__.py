from .outcome import Outcome
from .record import Record
from .repository_snapshot import RepositorySnapshot
from .settings import Settings
from .wrappers import RecordFile

__all__ = [
    "Outcome",
    "Record",
    "RecordFile",
    "RepositorySnapshot",
    "Settings",
]
