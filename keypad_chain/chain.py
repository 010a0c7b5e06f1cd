import logging
import re

from .cost import CostEvaluator
from .errors import InvalidCodeError
from .expand import expand_repeatedly, expand_sequence
from .graph import build_graph
from .layouts import DIRECTIONAL_LAYOUT, GAP, NUMERIC_LAYOUT
from .shortest_paths import compute_shortest_paths

logger = logging.getLogger(__name__)


def numeric_value(code):
    match = re.match("^([0-9]+)", code)
    if not match:
        raise InvalidCodeError("No numeric part in code %r" % code)
    return int(match.group(1))


def parse_codes(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def check_depth(depth):
    if depth < 0:
        raise ValueError("Depth must be non-negative, got %d" % depth)
    return depth


class KeypadChain:
    '''
    A robot at the numeric keypad, `depth` robots at directional keypads
    driving it, and whoever presses the last directional keypad.

    Graphs and shortest paths are built once per chain; the hop cost cache is
    shared by every code scored on the same chain.
    '''

    def __init__(self, depth=2, memoize=True):
        self.depth = check_depth(depth)
        self.numeric_paths = compute_shortest_paths(build_graph(NUMERIC_LAYOUT, GAP))
        self.arrow_paths = compute_shortest_paths(build_graph(DIRECTIONAL_LAYOUT, GAP))
        self.evaluator = CostEvaluator(self.arrow_paths, memoize=memoize)

    def _depth(self, depth):
        return self.depth if depth is None else check_depth(depth)

    def expand_code(self, code, depth=None):
        arrows = expand_sequence(code, self.numeric_paths)
        return expand_repeatedly(arrows, self.arrow_paths, self._depth(depth))

    def presses(self, code, depth=None):
        return self.evaluator.sequence_cost(code, self._depth(depth), self.numeric_paths)

    def complexity(self, codes, depth=None):
        depth = self._depth(depth)
        total = 0
        for code in codes:
            value = numeric_value(code)
            presses = self.presses(code, depth)
            logger.info("%s: %d * %d == %d", code, presses, value, presses * value)
            total += presses * value
        logger.debug("%d hop costs cached, %d cache hits",
                     len(self.evaluator.cache), self.evaluator.hits)
        return total


def complexity(codes, depth=2):
    return KeypadChain(depth).complexity(codes)
