"""
Splitting path expressions into segments and classifying them.
"""
import functools
import re

from . import grammar

CACHE_SIZE = 300

_INDEX_RE = re.compile(r'-?\d+(\.\d+)?', re.ASCII)


def split(expr):
    """
    Split a path expression on literal dots
    >>> split('a.b.2.c')
    ('a', 'b', '2', 'c')
    >>> split('')
    ('',)
    >>> split('a..b')
    ('a', '', 'b')
    """
    if not isinstance(expr, str):
        raise TypeError(f'path expression must be str, not {type(expr).__name__}')
    return tuple(grammar.template.parse_string(expr, parse_all=True).as_list())


@functools.lru_cache(CACHE_SIZE)
def _parse(expr):
    return split(expr)


def parse(path):
    """
    Parsed form of `path`. Strings are split (and cached); sequences of
    segments are returned as a tuple.
    >>> parse('objectList.0.subDude')
    ('objectList', '0', 'subDude')
    >>> parse(['a', 'b'])
    ('a', 'b')
    """
    if isinstance(path, str):
        return _parse(path)
    if isinstance(path, tuple):
        return path
    return tuple(path)


def is_index_segment(segment):
    """
    True if the segment addresses a list element
    >>> is_index_segment('3')
    True
    >>> is_index_segment('-1')
    True
    >>> is_index_segment('x3')
    False
    """
    return _INDEX_RE.fullmatch(segment) is not None


def to_index(segment):
    """
    Integer position for an index segment. Negative positions never address
    an element.
    """
    idx = int(segment)
    if idx < 0:
        raise IndexError(f'index {segment!r} is negative')
    return idx
