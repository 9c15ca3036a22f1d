"""
Core module for envguard.

This module provides the foundational components used throughout the package:
- Requirement and Outcome value types and the requirement merge rule
- Exception classes
- Enum definitions
"""

from .exceptions import *
from .enums import *
from .requirement import Requirement, Outcome, Validator, merge_requirements

__all__ = [
    'Requirement',
    'Outcome',
    'Validator',
    'merge_requirements',
]

from .exceptions import __all__ as exceptions_all
from .enums import __all__ as enums_all

__all__.extend(exceptions_all)
__all__.extend(enums_all)
