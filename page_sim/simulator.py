import logging
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from .clock import simulate_clock
from .errors import PageSimError, UnknownPolicy
from .parser import parse_refs, validate_frames
from .policies import simulate_fifo, simulate_lru, simulate_optimal

logger = logging.getLogger(__name__)

POLICIES = OrderedDict([
    ('fifo', simulate_fifo),
    ('lru', simulate_lru),
    ('clock', simulate_clock),
    ('opt', simulate_optimal),
])

POLICY_ALIASES = {
    'optimal': 'opt',
    'belady': 'opt',
    'second-chance': 'clock',
}


def resolve_policy(name):
    key = name.strip().lower()
    key = POLICY_ALIASES.get(key, key)
    if key not in POLICIES:
        raise UnknownPolicy(name, list(POLICIES))
    return key


class PageReplacementSimulator:
    def __init__(self):
        self.timeline = []
        self.timeline_step = 1
        self.last_results = []

    def run(self, refs, frames, policies=None, parallel=False):
        refs = tuple(refs)
        try:
            validate_frames(frames)
            keys = [resolve_policy(p) for p in (policies or POLICIES)]
        except PageSimError as exc:
            self.log_event("ERROR", str(exc))
            raise
        self.log_event("RUN", f"{len(refs)} references over {frames} frames",
                       metadata={'policies': keys})
        if parallel and len(keys) > 1:
            with ThreadPoolExecutor(max_workers=len(keys)) as pool:
                futures = [pool.submit(POLICIES[k], refs, frames) for k in keys]
                results = [f.result() for f in futures]
        else:
            results = [POLICIES[k](refs, frames) for k in keys]
        for result in results:
            logger.info("%s: %d faults in %d references", result.policy_name,
                        result.total_faults, len(result.steps))
            self.log_event("POLICY", f"{result.policy_name} - {result.total_faults} page faults",
                           metadata={'faults': result.total_faults, 'hits': result.total_hits})
        self.last_results = results
        return results

    def run_text(self, text, frames, policies=None, parallel=False):
        try:
            refs = parse_refs(text)
        except PageSimError as exc:
            self.log_event("ERROR", str(exc))
            raise
        self.log_event("PARSE", f"Parsed {len(refs)} references")
        return self.run(refs, frames, policies=policies, parallel=parallel)

    def compare(self, results=None):
        results = self.last_results if results is None else results
        rows = [{
            'policy': r.policy_name,
            'faults': r.total_faults,
            'hits': r.total_hits,
            'fault_rate': round(r.fault_rate, 4)
        } for r in results]
        best = min(results, key=lambda r: r.total_faults) if results else None
        return {
            'policies': rows,
            'best': best.policy_name if best else None,
            'references': len(results[0].steps) if results else 0
        }

    def log_event(self, category, message, metadata=None):
        event = {
            'step': self.timeline_step,
            'timestamp': datetime.now(),
            'category': category.upper(),
            'message': message,
            'metadata': metadata or {}
        }
        self.timeline_step += 1
        self.timeline.append(event)

    def get_timeline(self, limit=None):
        if limit is None or limit >= len(self.timeline):
            return list(self.timeline)
        return self.timeline[-limit:]
