'''
Press counts through a chain of directional robots, without building the
expanded sequences (they grow roughly 2.5x per robot).

A hop from one key to the next always starts and ends with every robot further
up the chain resting on A, so hops can be costed independently and memoised on
(source, target, depth).
'''

import logging

from .expand import arrows_for
from .layouts import ACTIVATE, HOME

logger = logging.getLogger(__name__)


class CostEvaluator:
    def __init__(self, arrow_paths, memoize=True):
        self.arrow_paths = arrow_paths
        self.memoize = memoize
        self.cache = {}
        self.hits = 0

    def hop_cost(self, source, target, depth, paths):
        """Presses at the bottom of the chain to move from source to target on
        the keypad described by `paths` and press target, with `depth`
        directional robots in between."""
        if depth < 0:
            raise ValueError("Depth must be non-negative, got %d" % depth)
        if depth == 0:
            return len(paths.path(source, target)) + 1
        return min(
            self.sequence_cost(arrows_for(path) + ACTIVATE, depth - 1)
            for path in paths.candidates(source, target)
        )

    def cost(self, source, target, depth):
        key = (source, target, depth)
        if self.memoize and key in self.cache:
            self.hits += 1
            return self.cache[key]
        presses = self.hop_cost(source, target, depth, self.arrow_paths)
        if self.memoize:
            self.cache[key] = presses
        return presses

    def sequence_cost(self, keys, depth, paths=None):
        total = 0
        current = HOME
        for key in keys:
            if paths is None:
                total += self.cost(current, key, depth)
            else:
                total += self.hop_cost(current, key, depth, paths)
            current = key
        return total

    def clear(self):
        logger.debug("Dropping %d cached hop costs (%d hits)", len(self.cache), self.hits)
        self.cache.clear()
        self.hits = 0
