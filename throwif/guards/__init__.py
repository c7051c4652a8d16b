"""Guards shipped with throwif

Importing this package attaches all guards to
:class:`~throwif.builder.GuardBuilder`, which happens automatically when
importing :mod:`throwif`.

.. currentmodule:: throwif.guards
.. autosummary::
   :toctree: generated

   generic
   comparison
   boolean
   char
   string
   collection
"""

from . import (
    generic,
    comparison,
    boolean,
    char,
    string,
    collection,
)
