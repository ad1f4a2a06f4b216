"""
Immutable mapper configuration.
"""
import collections

from .indexing import ArrayIndexMode


class MapperConfig(collections.namedtuple('MapperConfig', ('set_nulls', 'array_index_mode'))):
    """
    `set_nulls`: when false, writing `None` is a no-op and creates nothing.
    `array_index_mode`: `ArrayIndexMode` member or its name.
    """
    __slots__ = ()

    def __new__(cls, set_nulls=True, array_index_mode=ArrayIndexMode.ADDITIVE):
        return super().__new__(cls, bool(set_nulls), ArrayIndexMode.coerce(array_index_mode))

    @classmethod
    def from_mapping(cls, mapping):
        """
        Build from a plain mapping such as loaded settings
        >>> MapperConfig.from_mapping({'set_nulls': False}).set_nulls
        False
        """
        unknown = set(mapping) - set(cls._fields)
        if unknown:
            raise TypeError(f'unknown mapper options: {", ".join(sorted(unknown))}')
        return cls(**mapping)

    @property
    def policy(self):
        return self.array_index_mode.policy
