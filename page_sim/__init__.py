from .errors import PageSimError, ParseError, InvalidCapacity, UnknownPolicy
from .records import EMPTY, Step, Result
from .parser import parse_refs, validate_frames
from .policies import simulate_fifo, simulate_lru, simulate_optimal
from .clock import ClockBuffer, simulate_clock
from .simulator import POLICIES, PageReplacementSimulator, resolve_policy
from .config import SimulatorConfig
from .cli import CommandLineInterface
