# Defaults for the page replacement simulator.
import os
from dataclasses import dataclass, field
from typing import Tuple

# Classic textbook reference string
DEFAULT_SEQUENCE = "7,0,1,2,0,3,0,4,2,3,0,3,2"
DEFAULT_FRAMES = 3
DEFAULT_POLICIES = ("fifo", "lru", "clock", "opt")

# Width in characters of the longest bar in the fault chart
CHART_WIDTH = 40

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def env_log_level(default="WARNING"):
    level = os.environ.get("PAGE_SIM_LOG_LEVEL", default).strip().upper()
    return level if level in LOG_LEVELS else default


LOG_LEVEL = env_log_level()


@dataclass
class SimulatorConfig:
    sequence: str = DEFAULT_SEQUENCE
    frames: int = DEFAULT_FRAMES
    policies: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_POLICIES)
    verbose: bool = False
    chart: bool = False
    timeline: bool = False
    parallel: bool = False
    log_level: str = LOG_LEVEL

    @classmethod
    def from_args(cls, args):
        policies = DEFAULT_POLICIES
        if getattr(args, 'policies', None):
            policies = tuple(p for p in args.policies.split(',') if p.strip())
        log_level = (args.log_level or LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {args.log_level!r}; choose from {', '.join(LOG_LEVELS)}")
        return cls(
            sequence=args.sequence if args.sequence is not None else DEFAULT_SEQUENCE,
            frames=args.frames if args.frames is not None else DEFAULT_FRAMES,
            policies=policies,
            verbose=args.verbose,
            chart=args.chart,
            timeline=getattr(args, 'timeline', False),
            parallel=getattr(args, 'parallel', False),
            log_level=log_level,
        )
