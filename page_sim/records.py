from dataclasses import dataclass
from typing import Optional, Tuple

EMPTY = None


@dataclass(frozen=True)
class Step:
    reference: int
    snapshot: Tuple[Optional[int], ...]
    fault: bool

    @property
    def hit(self):
        return not self.fault

    @property
    def resident(self):
        return frozenset(page for page in self.snapshot if page is not EMPTY)


@dataclass(frozen=True)
class Result:
    policy_name: str
    total_faults: int
    steps: Tuple[Step, ...]

    @classmethod
    def from_steps(cls, policy_name, steps):
        steps = tuple(steps)
        return cls(policy_name, sum(1 for s in steps if s.fault), steps)

    @property
    def total_hits(self):
        return len(self.steps) - self.total_faults

    @property
    def fault_rate(self):
        if not self.steps:
            return 0.0
        return self.total_faults / len(self.steps)

    @property
    def hit_rate(self):
        if not self.steps:
            return 0.0
        return self.total_hits / len(self.steps)


def pad_snapshot(pages, frames):
    snapshot = list(pages)[:frames]
    snapshot.extend([EMPTY] * (frames - len(snapshot)))
    return tuple(snapshot)
