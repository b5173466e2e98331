"""
normapprox
==========

Normal distribution statistics over interchangeable numerical approximations
of the error function and of its inverse complementary form.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .special import *
from .special import __all__ as _special_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("normapprox")
__all__ = [
    "__version__",
    *_distr_all,
    *_special_all,
    *_types_all,
]

del _distr_all
del _special_all
del _types_all
