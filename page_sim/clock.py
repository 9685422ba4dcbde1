import logging

from .records import EMPTY, Step, Result
from .parser import validate_frames

logger = logging.getLogger(__name__)


class ClockBuffer:
    """Circular frame buffer with one use bit per slot."""

    def __init__(self, frames):
        self.frames = validate_frames(frames)
        size = max(frames, 1)
        self.slots = [EMPTY] * size
        self.used = [False] * size
        self.ptr = 0

    def find(self, page):
        for index in range(self.frames):
            if self.slots[index] == page:
                return index
        return None

    def access(self, page):
        """Reference ``page``; returns True on a fault."""
        index = self.find(page)
        if index is not None:
            self.used[index] = True
            return False
        if self.frames > 0:
            victim = self._sweep()
            if self.slots[victim] is not EMPTY:
                logger.debug("Clock evicts page %s from slot %d for %s", self.slots[victim], victim, page)
            self.slots[victim] = page
            self.used[victim] = True
            self.ptr = (victim + 1) % self.frames
        return True

    def _sweep(self):
        # at most one full turn: every set bit is cleared on the way round
        while self.used[self.ptr]:
            self.used[self.ptr] = False
            self.ptr = (self.ptr + 1) % self.frames
        return self.ptr

    def snapshot(self):
        return tuple(self.slots[:self.frames])


def simulate_clock(refs, frames):
    validate_frames(frames)
    buffer = ClockBuffer(frames)
    steps = []
    for ref in refs:
        fault = buffer.access(ref)
        steps.append(Step(ref, buffer.snapshot(), fault))
    return Result.from_steps("Clock", steps)
