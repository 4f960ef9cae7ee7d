from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from pish.history import HistoryStore


class SessionMode(Enum):
    INTERACTIVE = "interactive"
    BATCH = "batch"


@dataclass(frozen=True)
class Session:
    """
    Per-run context threaded through the loop, builtins and history.
    The mode is fixed for the lifetime of the run.
    """
    mode: SessionMode
    stream: TextIO
    history: HistoryStore

    @property
    def interactive(self):
        return self.mode is SessionMode.INTERACTIVE


class OutcomeKind(Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    USAGE_ERROR = "usage_error"
    SPAWN_ERROR = "spawn_error"


@dataclass(frozen=True)
class ExecutionOutcome:
    kind: OutcomeKind
    status: Optional[int] = None

    @classmethod
    def builtin(cls):
        return cls(OutcomeKind.BUILTIN)

    @classmethod
    def external(cls, status):
        return cls(OutcomeKind.EXTERNAL, status)

    @classmethod
    def usage_error(cls):
        return cls(OutcomeKind.USAGE_ERROR)

    @classmethod
    def spawn_error(cls):
        return cls(OutcomeKind.SPAWN_ERROR)
