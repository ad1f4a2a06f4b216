"""
Exceptions raised on structural mismatches while reading or writing.

All of them are raised `from` the underlying TypeError/IndexError/ValueError,
which remains available as `__cause__`.
"""


class DocumentMapperError(Exception):
    """
    Base class. `key` is the document key being traversed and `index` the
    index segment involved, if any.
    """
    def __init__(self, message, key=None, index=None):
        super().__init__(message)
        self.key = key
        self.index = index


class IndexAccessError(DocumentMapperError):
    """
    A read used a list index on a non-list value, or the index was out of bounds.
    """


class NavigationError(DocumentMapperError):
    """
    A read tried to descend into something that is not a document.
    """


class IndexWriteError(DocumentMapperError):
    """
    A write treated a non-list as a list, could not resolve the index, or the
    nested-index target was not a document.
    """
