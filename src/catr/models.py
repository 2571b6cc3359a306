# src/catr/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from catr.config import STDIN_TOKEN
from catr.errors import ConfigurationError


class NumberingMode(Enum):
    NONE = "none"
    ALL = "all"
    NONBLANK = "nonblank"

    @classmethod
    def from_flags(cls, number_all: bool, number_nonblank: bool) -> "NumberingMode":
        # -b wins over -n
        if number_nonblank:
            return cls.NONBLANK
        if number_all:
            return cls.ALL
        return cls.NONE


@dataclass(frozen=True)
class CatConfig:
    """Immutable run configuration handed from the CLI to the runner."""
    files: Tuple[str, ...] = (STDIN_TOKEN,)
    number_all: bool = False
    number_nonblank: bool = False

    def __post_init__(self):
        if not self.files:
            raise ConfigurationError("at least one FILE token is required")
        for token in self.files:
            if not token:
                raise ConfigurationError("FILE tokens must not be empty")

    @classmethod
    def build(cls, files: Sequence[str], number_all: bool = False, number_nonblank: bool = False) -> "CatConfig":
        """Builds a config, falling back to standard input when no files are given."""
        tokens = tuple(files) if files else (STDIN_TOKEN,)
        return cls(files=tokens, number_all=number_all, number_nonblank=number_nonblank)

    @property
    def numbering(self) -> NumberingMode:
        return NumberingMode.from_flags(self.number_all, self.number_nonblank)


class LineCounter:
    """Run-wide line number. Shared across every file of one run, never reset."""

    def __init__(self, start: int = 1):
        self.value = start

    def take(self) -> int:
        """Returns the current number and advances to the next one."""
        current = self.value
        self.value += 1
        return current

    def __repr__(self):
        return f"LineCounter(value={self.value})"


@dataclass(frozen=True)
class Diagnostic:
    token: str
    message: str

    def __str__(self):
        return self.message


@dataclass
class RunReport:
    """What a run did: which tokens were streamed and which were reported."""
    streamed: List[str] = field(default_factory=list)
    # Tokens that produced output or were read to the end, even if a read later failed
    recovered: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    next_number: int = 1

    @property
    def failed(self) -> List[str]:
        return [d.token for d in self.diagnostics]

    @property
    def ok(self) -> bool:
        """A run succeeds when at least one source was recovered."""
        return bool(self.recovered)
