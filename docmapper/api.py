"""
Module-level api backed by a default mapper (nulls are written, ADDITIVE
array indexes).
"""
from .mapper import DocumentMapper

_default = DocumentMapper()


def mapper(**options):
    """
    New DocumentMapper with the given options
    >>> mapper(array_index_mode='explicit')
    DocumentMapper(set_nulls=True, array_index_mode=EXPLICIT)
    """
    return DocumentMapper(**options)


def get_value(source, *exprs, default=None):
    """
    Get the value at an expression, or the first non-null value of several
    >>> d = {'hello': {'there': [{'name': 'x'}]}}
    >>> get_value(d, 'hello.there.0.name')
    'x'
    >>> get_value(d, 'missing', 'hello.there.0.name')
    'x'
    >>> get_value(d, 'missing', default=7)
    7
    """
    return _default.get_value(source, *exprs, default=default)


def set_value(target, expr, value):
    """
    Set a value, creating intermediate documents and lists
    >>> d = {}
    >>> set_value(d, 'hello.there', 1)
    >>> set_value(d, 'hello.list.0', 'a')
    >>> d
    {'hello': {'there': 1, 'list': ['a']}}
    """
    _default.set_value(target, expr, value)


def map_value(source, source_expr, target, target_expr):
    """
    Copy a value between documents
    >>> target = {}
    >>> map_value({'id': 'hans'}, 'id', target, 'doc.id')
    >>> target
    {'doc': {'id': 'hans'}}
    """
    _default.map(source, source_expr, target, target_expr)


def set_values(target, items):
    """
    Set several values in order
    >>> set_values({}, [('a.b', 1), ('a.c', 2)])
    {'a': {'b': 1, 'c': 2}}
    """
    return _default.set_values(target, items)


def map_values(source, target, pairs):
    """
    Copy several values in order
    >>> map_values({'a': 1, 'b': 2}, {}, {'a': 'x.a', 'b': 'x.b'})
    {'x': {'a': 1, 'b': 2}}
    """
    return _default.map_values(source, target, pairs)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
