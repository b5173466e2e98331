"""
Distributions subpackage

The Normal distribution facade over the approximation layer:

- :class:`NormalDistribution` (:mod:`.normal`);
- Marsaglia polar sampling (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .normal import SIGMA_RULE_PROBABILITIES, NormalDistribution
from .sampling import polar_standard_normal

__all__ = [
    "NormalDistribution",
    "SIGMA_RULE_PROBABILITIES",
    "polar_standard_normal",
]
