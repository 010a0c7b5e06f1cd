'''
All-pairs shortest paths over a keypad graph (Floyd-Warshall).

Every minimum-length path is kept, not just one: the cost evaluator needs to
try all of them. They are ordered so the first one is the path a robot would
most cheaply have typed for it one level up:
  1. fewest edges
  2. lowest weight, where an edge repeating the previous edge's direction
     only costs CONTINUATION_WEIGHT (so "<<^" beats "<^<")
  3. direction priority: "<" first, then "v", "^" and ">" last
'''

import logging

import numpy as np

from .errors import UnknownKeyError, UnreachableKeyError
from .layouts import DOWN, LEFT, RIGHT, UP

logger = logging.getLogger(__name__)

CONTINUATION_WEIGHT = 0.9

DIRECTION_PRIORITY = {LEFT: 0, DOWN: 1, UP: 2, RIGHT: 3}


def path_weight(path):
    weight = 0
    previous = None
    for edge in path:
        if previous is not None and edge.direction == previous.direction:
            weight += CONTINUATION_WEIGHT
        else:
            weight += edge.weight
        previous = edge
    return weight


def path_rank(path):
    return (len(path), round(path_weight(path), 6), [DIRECTION_PRIORITY[edge.direction] for edge in path])


class ShortestPaths:
    def __init__(self, keys, distance, paths):
        self.keys = tuple(keys)
        self.index = {key: i for i, key in enumerate(self.keys)}
        self.distances = distance
        self.paths = paths

    def __contains__(self, key):
        return key in self.index

    def _check(self, key):
        if key not in self.index:
            raise UnknownKeyError(key, self.keys)

    def candidates(self, source, target):
        """Every minimum-length path from source to target, preferred first."""
        self._check(source)
        self._check(target)
        candidates = self.paths.get((source, target))
        if not candidates:
            raise UnreachableKeyError("No path from %r to %r" % (source, target))
        return candidates

    def path(self, source, target):
        return self.candidates(source, target)[0]

    def distance(self, source, target):
        self._check(source)
        self._check(target)
        return self.distances[self.index[source], self.index[target]]


def compute_shortest_paths(graph):
    keys = list(graph)
    index = {key: i for i, key in enumerate(keys)}
    n = len(keys)

    distance = np.full((n, n), np.inf)
    paths = {}
    for key in keys:
        distance[index[key], index[key]] = 0
        paths[key, key] = [()]
    for key, edges in graph.items():
        for edge in edges:
            distance[index[key], index[edge.target]] = 1
            paths[key, edge.target] = [(edge,)]

    for k in keys:
        for i in keys:
            if i == k:
                continue
            for j in keys:
                if j == k or j == i:
                    continue
                via = distance[index[i], index[k]] + distance[index[k], index[j]]
                current = distance[index[i], index[j]]
                if via == np.inf or via > current:
                    continue
                joined = [ik + kj for ik in paths[i, k] for kj in paths[k, j]]
                if via < current:
                    distance[index[i], index[j]] = via
                    paths[i, j] = joined
                else:
                    # dict.fromkeys drops paths already found through another k
                    paths[i, j] = list(dict.fromkeys(paths[i, j] + joined))

    for pair in paths:
        paths[pair].sort(key=path_rank)

    distance.setflags(write=False)
    logger.debug("Shortest paths for %d keys, %d paths kept",
                 n, sum(len(candidates) for candidates in paths.values()))
    return ShortestPaths(keys, distance, paths)
