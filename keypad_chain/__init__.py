from .chain import KeypadChain, complexity, numeric_value, parse_codes
from .cost import CostEvaluator
from .errors import InvalidCodeError, KeypadError, UnknownKeyError, UnreachableKeyError
from .expand import expand, expand_repeatedly, expand_sequence
from .graph import Edge, build_graph
from .layouts import DIRECTIONAL_LAYOUT, NUMERIC_LAYOUT
from .shortest_paths import ShortestPaths, compute_shortest_paths
