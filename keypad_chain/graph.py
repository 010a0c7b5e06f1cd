import logging
from collections import namedtuple

import numpy as np

from .layouts import DIRECTIONS, GAP

logger = logging.getLogger(__name__)

# Pressing `direction` with the finger over `source` moves it over `target`.
Edge = namedtuple("Edge", ["source", "direction", "target", "weight"], defaults=[1])


def build_graph(layout, gap=GAP):
    layout = np.asarray(layout)
    height, width = layout.shape
    graph = {}
    for y, x in np.ndindex(height, width):
        key = str(layout[y, x])
        if key == gap:
            continue
        edges = []
        for direction in DIRECTIONS:
            ny, nx = y + direction[0], x + direction[1]
            if not (0 <= ny < height and 0 <= nx < width):
                continue
            neighbour = str(layout[ny, nx])
            if neighbour == gap:
                continue
            edges.append(Edge(key, direction, neighbour))
        graph[key] = tuple(edges)
    logger.debug("Built graph of %d keys and %d edges from a %dx%d layout",
                 len(graph), sum(len(edges) for edges in graph.values()), height, width)
    return graph
