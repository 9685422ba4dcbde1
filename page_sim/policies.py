import logging
from collections import deque, OrderedDict

from .records import Step, Result, pad_snapshot
from .parser import validate_frames

logger = logging.getLogger(__name__)


def simulate_fifo(refs, frames):
    validate_frames(frames)
    queue = deque()
    resident = set()
    steps = []
    for ref in refs:
        fault = ref not in resident
        if fault:
            if len(queue) == frames and queue:
                victim = queue.popleft()
                resident.discard(victim)
                logger.debug("FIFO evicts page %s for %s", victim, ref)
            if frames > 0:
                queue.append(ref)
                resident.add(ref)
        steps.append(Step(ref, pad_snapshot(queue, frames), fault))
    return Result.from_steps("FIFO", steps)


def simulate_lru(refs, frames):
    validate_frames(frames)
    # oldest use first, most recent use last
    recency = OrderedDict()
    steps = []
    for ref in refs:
        fault = ref not in recency
        if not fault:
            recency.move_to_end(ref)
        elif frames > 0:
            if len(recency) == frames:
                victim, _ = recency.popitem(last=False)
                logger.debug("LRU evicts page %s for %s", victim, ref)
            recency[ref] = True
        steps.append(Step(ref, pad_snapshot(recency.keys(), frames), fault))
    return Result.from_steps("LRU", steps)


def _next_use(refs, page, start):
    for position in range(start, len(refs)):
        if refs[position] == page:
            return position
    return None


def choose_optimal_victim(memory, refs, start):
    """Return the slot index Belady's algorithm evicts.

    The first slot whose page never recurs after ``start`` wins outright.
    Otherwise the page used farthest in the future is chosen; on equal
    distances the lower slot is kept as the victim.
    """
    victim, farthest = -1, -1
    for slot, page in enumerate(memory):
        next_use = _next_use(refs, page, start)
        if next_use is None:
            return slot
        if next_use > farthest:
            victim, farthest = slot, next_use
    return victim


def simulate_optimal(refs, frames):
    validate_frames(frames)
    refs = tuple(refs)
    memory = []
    steps = []
    for position, ref in enumerate(refs):
        fault = ref not in memory
        if fault and frames > 0:
            if len(memory) < frames:
                memory.append(ref)
            else:
                slot = choose_optimal_victim(memory, refs, position + 1)
                logger.debug("Optimal evicts page %s from slot %d for %s", memory[slot], slot, ref)
                memory[slot] = ref
        steps.append(Step(ref, pad_snapshot(memory, frames), fault))
    return Result.from_steps("Optimal", steps)

