"""
Array index policies applied when a write path addresses a list element.
"""
import enum

from .paths import to_index


class IndexPolicy:
    """
    Strategy for list writes.

    `put` stores a value for a terminal index segment. `slot` returns the
    position a nested write should descend into, growing the list by at most
    one `factory()` element.
    """
    name = None

    def put(self, seq, token, value):
        raise NotImplementedError

    def slot(self, seq, token, factory):
        raise NotImplementedError

    def __repr__(self):
        return f'<{self.__class__.__name__}>'


class Additive(IndexPolicy):
    """
    Every write appends; the literal index is ignored. Repeated writes to the
    same path never clobber each other, but existing elements cannot be
    targeted.
    """
    name = 'additive'

    def put(self, seq, token, value):
        seq.append(value)

    def slot(self, seq, token, factory):
        seq.append(factory())
        return len(seq) - 1


class Explicit(IndexPolicy):
    """
    The index is taken literally. Existing positions are overwritten and the
    position right past the end appends.
    """
    name = 'explicit'

    def put(self, seq, token, value):
        idx = to_index(token)
        if idx < len(seq):
            seq[idx] = value
        else:
            seq.append(value)

    def slot(self, seq, token, factory):
        idx = to_index(token)
        # only ever one slot is added, gaps are not back-filled
        if idx >= len(seq):
            seq.append(factory())
        return idx


class ArrayIndexMode(enum.Enum):
    ADDITIVE = Additive()
    EXPLICIT = Explicit()

    @property
    def policy(self):
        return self.value

    @classmethod
    def coerce(cls, mode):
        """
        Accept a member or its (case-insensitive) name
        >>> ArrayIndexMode.coerce('explicit').name
        'EXPLICIT'
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls[mode.upper()]
            except KeyError:
                pass
        raise ValueError(f'unknown array index mode: {mode!r}')
