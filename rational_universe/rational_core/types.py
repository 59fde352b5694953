"""
Core type definitions for fixed-width rational arithmetic.

Integer representations are NumPy signed integer scalar types. Everything
else in the package refers to them through the aliases and defaults here.
"""

from typing import Union

import numpy as np

# An integer representation: one of the NumPy signed scalar types below
IntType = type

# A raw integer operand (Python int or NumPy signed scalar)
RawInteger = Union[int, np.signedinteger]

# Supported representations, narrowest first
SIGNED_INT_TYPES: tuple = (np.int8, np.int16, np.int32, np.int64)

# Representation used by bare Rational(...) construction
DEFAULT_INT_TYPE: IntType = np.int64

# Separator written between numerator and denominator
SEPARATOR = "/"
