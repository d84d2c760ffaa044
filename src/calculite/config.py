"""Default settings, read once from the environment."""

import os

# Maximum count of digit characters in one operand
MAX_DIGITS = int(os.getenv("CALCULITE_MAX_DIGITS", "30"))
if MAX_DIGITS < 1:
    raise ValueError(f"CALCULITE_MAX_DIGITS must be positive, got {MAX_DIGITS}")

# Display symbols
DECIMAL_SYMBOL = os.getenv("CALCULITE_DECIMAL_SYMBOL", ".")
GROUPING_SYMBOL = os.getenv("CALCULITE_GROUPING_SYMBOL", ",")
