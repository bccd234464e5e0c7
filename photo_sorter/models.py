from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class CapturedTimestamp:
    """
    Capture time as read from EXIF. No timezone, values are used verbatim.
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @property
    def base_name(self) -> str:
        return (f"{self.year}_{self.month}_{self.day}_"
                f"{self.hour}_{self.minute}_{self.second}")

    def __str__(self) -> str:
        return (f"{self.year}-{self.month}-{self.day} "
                f"{self.hour}:{self.minute}:{self.second}")


@dataclass(frozen=True)
class DestinationPlan:
    """
    Where a single file should land.

    resolve_collisions is True for classified files: the base name is probed
    with numeric suffixes until a free slot is found.
    """
    directory: Path
    base_name: str
    extension: str
    resolve_collisions: bool

    @property
    def filename(self) -> str:
        return f"{self.base_name}{self.extension}"


@dataclass
class FileOutcome:
    source: Path
    timestamp: Optional[CapturedTimestamp] = None
    destination: Optional[Path] = None
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return 'failed'
        return 'classified' if self.timestamp else 'unclassified'


@dataclass
class RunSummary:
    outcomes: List[FileOutcome] = field(default_factory=list)

    def add(self, outcome: FileOutcome):
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def classified(self) -> int:
        return sum(1 for o in self.outcomes if o.status == 'classified')

    @property
    def unclassified(self) -> int:
        return sum(1 for o in self.outcomes if o.status == 'unclassified')

    @property
    def failures(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status == 'failed']

    @property
    def succeeded(self) -> int:
        return self.total - len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures
