class KeypadError(Exception):
    pass


class UnknownKeyError(KeypadError, KeyError):
    """A key that is not on the keypad being typed on."""

    def __init__(self, key, keys=()):
        self.key = key
        self.keys = tuple(keys)
        super().__init__(key)

    def __str__(self):
        return "Unknown key %r, expected one of %s" % (self.key, "".join(self.keys))


class UnreachableKeyError(KeypadError, LookupError):
    """No path between two keys; means the layout itself is broken."""


class InvalidCodeError(KeypadError, ValueError):
    pass
