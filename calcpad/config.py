"""Runtime knobs for calcpad.

Every value can be overridden with an environment variable prefixed with
CALCPAD_, read once at import time.
"""

import os

OPERATORS = "+-*/"
DISPLAY_GLYPHS = {"*": "×", "/": "÷"}

# divisors smaller than this (by absolute value) make the quotient 0
NEAR_ZERO_DIVISOR = float(os.getenv("CALCPAD_NEAR_ZERO_DIVISOR", "1e-6"))

# result formatting
INTEGER_TOLERANCE = float(os.getenv("CALCPAD_INTEGER_TOLERANCE", "1e-6"))
RESULT_FRACTION_DIGITS = int(os.getenv("CALCPAD_RESULT_FRACTION_DIGITS", "6"))
ERROR_TEXT = os.getenv("CALCPAD_ERROR_TEXT", "Error")

LOG_LEVEL = os.getenv("CALCPAD_LOG_LEVEL", "WARNING")
