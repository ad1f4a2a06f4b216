"""
Storing values at parsed paths, creating intermediate containers as needed.
"""
import logging

from . import errors
from .config import MapperConfig
from .paths import is_index_segment
from .utils import is_dict_like, is_mutable_list_like, lookup

logger = logging.getLogger(__name__)


def new_document(doc):
    """
    Empty document of the same class as `doc`.
    """
    return doc.__class__()


class Writer:
    def __init__(self, config=None):
        self.config = config or MapperConfig()
        self.policy = self.config.policy

    def write(self, doc, path, value, start=0):
        """
        Store `value` at `path[start:]` in `doc`. Containers created before a
        failure are left in place.
        """
        remaining = len(path) - start
        if remaining <= 0 or (not self.config.set_nulls and value is None):
            return

        current = path[start]
        if remaining == 1:
            doc[current] = value
            return

        nxt = path[start + 1]
        if is_index_segment(nxt):
            seq = self._sequence(doc, current, nxt)
            if remaining == 2:
                try:
                    self.policy.put(seq, nxt, value)
                except (TypeError, ValueError, IndexError) as exc:
                    raise errors.IndexWriteError(
                        f"Could not set index '{nxt}' on list with key '{current}'",
                        key=current, index=nxt) from exc
                return
            sub = self._element(doc, current, seq, nxt)
            self.write(sub, path, value, start + 2)
            return

        base = lookup(doc, current, None)
        if not is_dict_like(base):
            logger.debug('creating document at key %r', current)
            base = new_document(doc)
        doc[current] = base
        self.write(base, path, value, start + 1)

    def _sequence(self, doc, key, token):
        seq = lookup(doc, key, None)
        if seq is None:
            logger.debug('creating list at key %r', key)
            seq = []
            doc[key] = seq
        elif not is_mutable_list_like(seq):
            raise errors.IndexWriteError(
                f"Could not set index '{token}' on key '{key}' (is it a list?)",
                key=key, index=token) from TypeError(f'{type(seq).__name__} is not a mutable list')
        return seq

    def _element(self, doc, key, seq, token):
        try:
            idx = self.policy.slot(seq, token, lambda: new_document(doc))
            sub = seq[idx]
            if not is_dict_like(sub):
                raise TypeError(f'element is {type(sub).__name__}, not a document')
        except (TypeError, ValueError, IndexError) as exc:
            raise errors.IndexWriteError(
                f"Could not set value on list. Either property '{key}' is not a list "
                f"or index '{token}' does not exist.",
                key=key, index=token) from exc
        return sub
