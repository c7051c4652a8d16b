from __future__ import annotations

import logging
from os import environ

from datasalad.settings import (
    CachingSource,
    Setting,
)

lgr = logging.getLogger('throwif.config')


class Environment(CachingSource):
    """Configuration items declared via ``THROWIF_*`` environment variables

    Variable names are translated to configuration keys by lower-casing,
    and replacing ``_`` with ``.``, and ``__`` with ``-``. For example,
    ``THROWIF_FLOAT_TOLERANCE`` becomes ``throwif.float.tolerance``.
    """
    var_prefix = 'THROWIF_'

    def _load(self) -> None:
        # not resetting here, incremental load
        for k in environ:
            if not k.startswith(self.var_prefix):
                continue
            item_key = get_key_from_varname(k)
            lgr.debug('Loading %r from environment variable %s', item_key, k)
            self._items[item_key] = Setting(environ[k])

    def __str__(self):
        return 'Environment'

    def __repr__(self):
        return 'Environment()'


def get_key_from_varname(name: str) -> str:
    """Translate an environment variable name to a configuration key"""
    return name.replace('__', '-').replace('_', '.').lower()
