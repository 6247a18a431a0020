"""
Configuration settings for statement metrics collection.
"""

from typing import FrozenSet

# Built-in BL instructions; any other CALL name is a user-defined instruction
PRIMITIVE_INSTRUCTIONS: FrozenSet[str] = frozenset(
    {"move", "turnleft", "turnright", "infect", "skip"}
)

# Stored programs
PROGRAM_GLOB: str = "*.json"
ENCODING: str = "utf-8"

# Output
METRICS_CSV: str = "statement_metrics.csv"
