from .layouts import ACTIVATE, HOME, direction_to_arrow


def arrows_for(path):
    return "".join(direction_to_arrow(edge.direction) for edge in path)


def expand(keys, paths):
    '''
    Presses one keypad up the chain that make a robot type `keys`: move its
    finger along the preferred path to each key, then activate. Every robot's
    finger starts over the home key.
    '''
    current = HOME
    for key in keys:
        for edge in paths.path(current, key):
            yield direction_to_arrow(edge.direction)
        yield ACTIVATE
        current = key


def expand_sequence(keys, paths):
    return "".join(expand(keys, paths))


def expand_repeatedly(keys, arrow_paths, times):
    if times < 0:
        raise ValueError("Cannot expand a negative number of times: %d" % times)
    sequence = "".join(keys)
    for _ in range(times):
        sequence = expand_sequence(sequence, arrow_paths)
    return sequence
