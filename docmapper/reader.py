"""
Resolving parsed paths against a document. Never mutates.
"""
import logging

from . import errors
from .paths import is_index_segment, to_index
from .utils import is_dict_like, is_list_like, lookup
from .utypes import ABSENT

logger = logging.getLogger(__name__)


def _element(value, token):
    if not is_list_like(value):
        raise TypeError(f'{type(value).__name__} is not a list')
    return value[to_index(token)]


class Reader:
    def read(self, doc, path, start=0):
        """
        Value addressed by `path[start:]` in `doc`, or ABSENT.
        """
        remaining = len(path) - start
        if remaining <= 0:
            return ABSENT

        current = path[start]
        if remaining == 1:
            return lookup(doc, current, ABSENT)

        nxt = path[start + 1]
        if current not in doc:
            return ABSENT
        value = doc[current]

        if is_index_segment(nxt):
            if remaining == 2:
                try:
                    return _element(value, nxt)
                except (TypeError, ValueError, IndexError) as exc:
                    raise errors.IndexAccessError(
                        f"Could not get index '{nxt}' on list (is it a list?) with key '{current}'",
                        key=current, index=nxt) from exc
            try:
                sub = _element(value, nxt)
                if sub is not None and not is_dict_like(sub):
                    raise TypeError(f'element is {type(sub).__name__}, not a document')
            except (TypeError, ValueError, IndexError) as exc:
                raise errors.NavigationError(
                    f"Unable to descend into index '{nxt}' of key '{current}'",
                    key=current, index=nxt) from exc
            if sub is None:
                return ABSENT
            return self.read(sub, path, start + 2)

        if value is None:
            return ABSENT
        if not is_dict_like(value):
            raise errors.NavigationError(
                f"Unable to descend into key '{current}'",
                key=current) from TypeError(f'{type(value).__name__} is not a document')
        return self.read(value, path, start + 1)

    def read_first(self, doc, paths):
        """
        First result over `paths` that is neither ABSENT nor None. A candidate
        failing on document structure counts as no match.
        """
        for path in paths:
            try:
                value = self.read(doc, path)
            except errors.DocumentMapperError as exc:
                logger.debug('skipping candidate %s: %s', '.'.join(path), exc)
                continue
            if value is not ABSENT and value is not None:
                return value
        return ABSENT
