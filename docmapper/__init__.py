"""
Read and write nested documents (dicts and lists) with dotted path expressions.
"""
from .api import get_value, set_value, map_value, set_values, map_values, mapper  # noqa: F401
from .config import MapperConfig  # noqa: F401
from .errors import DocumentMapperError, IndexAccessError, NavigationError, IndexWriteError  # noqa: F401
from .indexing import ArrayIndexMode, IndexPolicy, Additive, Explicit  # noqa: F401
from .mapper import DocumentMapper  # noqa: F401
from .paths import split, parse, is_index_segment  # noqa: F401
from .reader import Reader  # noqa: F401
from .utypes import ABSENT  # noqa: F401
from .writer import Writer  # noqa: F401
