"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import strings
from . import numeric
from . import sequences
from . import scalars
from . import files
from . import settings
from . import exceptions

from .strings import *
from .numeric import *
from .sequences import *
from .scalars import *
from .files import *

__all__ = [
    'strings',
    'numeric',
    'sequences',
    'scalars',
    'files',
    'settings',
    'exceptions',
    *strings.__all__,
    *numeric.__all__,
    *sequences.__all__,
    *scalars.__all__,
    *files.__all__
]
