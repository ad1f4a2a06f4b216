"""
DocumentMapper: reads, writes and copies values between documents using
dotted path expressions.
"""
from .config import MapperConfig
from .indexing import ArrayIndexMode
from .paths import parse
from .reader import Reader
from .utils import is_dict_like
from .utypes import ABSENT
from .writer import Writer


def _check_document(doc, action):
    if not is_dict_like(doc):
        raise TypeError(f'Cannot {action} {type(doc).__name__} - use a dict or other mapping')


def _pairs(items):
    if hasattr(items, 'items') and callable(items.items):
        return items.items()
    return items


class DocumentMapper:
    """
    `set_nulls` (default True) and `array_index_mode` (default ADDITIVE) are
    fixed at construction. Alternatively pass a ready `MapperConfig` as
    `config` to share one between mappers; it cannot be combined with the
    individual options.
    """
    def __init__(self, set_nulls=None, array_index_mode=None, config=None):
        if config is not None:
            if set_nulls is not None or array_index_mode is not None:
                raise TypeError('pass either config or set_nulls/array_index_mode, not both')
            self.config = config
        else:
            self.config = MapperConfig(
                True if set_nulls is None else set_nulls,
                ArrayIndexMode.ADDITIVE if array_index_mode is None else array_index_mode)
        self.reader = Reader()
        self.writer = Writer(self.config)

    def __repr__(self):
        return (f'{self.__class__.__name__}(set_nulls={self.config.set_nulls}, '
                f'array_index_mode={self.config.array_index_mode.name})')

    @property
    def set_nulls(self):
        return self.config.set_nulls

    @property
    def array_index_mode(self):
        return self.config.array_index_mode

    def get_value(self, source, *exprs, default=None):
        """
        Value at a single expression (structural errors propagate), or the
        first non-null value over several expressions (failing candidates are
        skipped). `default` when nothing is found.
        """
        _check_document(source, 'read')
        if len(exprs) == 1:
            value = self.reader.read(source, parse(exprs[0]))
        else:
            value = self.reader.read_first(source, (parse(e) for e in exprs))
        return default if value is ABSENT else value

    def set_value(self, target, expr, value):
        _check_document(target, 'update')
        self.writer.write(target, parse(expr), value)

    def map(self, source, source_expr, target, target_expr):
        """
        Copy the value at `source_expr` in `source` to `target_expr` in
        `target`. A missing source value is written as None unless nulls are
        disabled.
        """
        if source is None or target is None:
            return
        _check_document(source, 'read')
        _check_document(target, 'update')
        value = self.reader.read(source, parse(source_expr))
        if value is ABSENT:
            value = None
        if not self.config.set_nulls and value is None:
            return
        self.writer.write(target, parse(target_expr), value)

    def set_values(self, target, items):
        """
        Apply `(expr, value)` pairs (or a mapping) to `target` in order.
        """
        for expr, value in _pairs(items):
            self.set_value(target, expr, value)
        return target

    def map_values(self, source, target, pairs):
        """
        Apply `map` for each `(source_expr, target_expr)` pair (or mapping item).
        """
        for source_expr, target_expr in _pairs(pairs):
            self.map(source, source_expr, target, target_expr)
        return target
