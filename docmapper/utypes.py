"""
Sentinels shared across the reader, writer and mapper.
"""


class MetaAbsent(type):
    def __repr__(cls):
        return '<ABSENT>'
    def __bool__(cls):
        return False


class ABSENT(metaclass=MetaAbsent):
    """
    Result of a lookup that found nothing. Distinct from a present `None`.
    """
    def __init__(self):
        raise TypeError('ABSENT is a sentinel and cannot be instantiated')
