"""
Default configuration, overridable from the environment.

Per-call overrides are plain dicts, e.g. ``{"precedence": "standard"}``.
"""
import os

# Operators are applied strictly left to right: 2 + 3 * 4 == 20
PRECEDENCE_SEQUENTIAL = "sequential"
# Usual mathematical precedence: 2 + 3 * 4 == 14
PRECEDENCE_STANDARD = "standard"

PRECEDENCE_CHOICES = (PRECEDENCE_SEQUENTIAL, PRECEDENCE_STANDARD)

PRECEDENCE = os.environ.get("CALCTREE_PRECEDENCE", PRECEDENCE_SEQUENTIAL)

# Groups and function arguments nested deeper than this are rejected
MAX_NESTING_DEPTH = int(os.environ.get("CALCTREE_MAX_NESTING_DEPTH", "100"))
