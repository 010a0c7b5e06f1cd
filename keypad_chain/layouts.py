'''
The two fixed keypads, indexed [y][x] like every grid in this repo.

+---+---+---+
| 7 | 8 | 9 |          +---+---+
+---+---+---+          | ^ | A |
| 4 | 5 | 6 |      +---+---+---+
+---+---+---+      | < | v | > |
| 1 | 2 | 3 |      +---+---+---+
+---+---+---+
    | 0 | A |
    +---+---+
'''

import numpy as np

GAP = " "
HOME = "A"
ACTIVATE = "A"

# (dy, dx)
UP = (-1, 0)
RIGHT = (0, 1)
DOWN = (1, 0)
LEFT = (0, -1)
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

ARROWS = {UP: "^", RIGHT: ">", DOWN: "v", LEFT: "<"}


def make_layout(rows):
    layout = np.array([list(row) for row in rows], dtype="<U1")
    layout.setflags(write=False)
    return layout


NUMERIC_LAYOUT = make_layout([
    "789",
    "456",
    "123",
    " 0A",
])

DIRECTIONAL_LAYOUT = make_layout([
    " ^A",
    "<v>",
])


def direction_to_arrow(direction):
    return ARROWS[direction]


def keys_of(layout, gap=GAP):
    return [str(key) for key in layout.flat if key != gap]
