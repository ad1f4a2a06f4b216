"""
What the reader and writer accept as documents and lists.

Checks are structural so that dict/list subclasses, OrderedDict and
BSON-style containers all work without registration.
"""


def is_dict_like(node):
    """
    A document: something with callable keys() that can be indexed by key.
    Path key segments can only be resolved inside one of these.
    """
    return (
        hasattr(node, 'keys') and callable(node.keys)
        and hasattr(node, '__getitem__')
    )


def is_list_like(node):
    """
    A list for index segments: indexable, but neither a document nor a
    string/bytes value (those are leaf scalars here).
    """
    return (
        hasattr(node, '__getitem__')
        and not isinstance(node, (str, bytes, bytearray))
        and not is_dict_like(node)
    )


def is_mutable_list_like(node):
    """
    A list the writer can grow and overwrite: list-like with append() and
    item assignment. Tuples are readable but not writable targets.
    """
    return (
        is_list_like(node)
        and hasattr(node, 'append')
        and hasattr(node, '__setitem__')
    )


def lookup(node, key, default):
    """
    Value at `key` in a document, or `default` when the key is missing.
    Uses a membership test first so defaultdict-style nodes are not extended.
    """
    if key in node:
        return node[key]
    return default
