from __future__ import generator_stop


class InvalidInput(ValueError):
    """Raised when a structure or routine is given input it cannot work with,
    for example an empty sequence where at least one element is required.
    """


class IndexOutOfRange(IndexError):
    """Raised when a position or a half-open range `[left, right)` does not fit
    the bounds of the structure it is applied to.
    Unlike builtin sequences, negative positions are never wrapped around.
    """

    def __init__(self, *args, size=None):
        super().__init__(*args)
        self.size = size
