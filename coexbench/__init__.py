"""
coexbench

Benchmarks gene coexpression data against curated pathway annotations by
computing a partial AUC over the low false-positive-rate region.
"""

__version__ = "1.0.0"

from .exceptions import CoexBenchError, DegenerateInputError, FormatError

__all__ = [
    "CoexBenchError",
    "DegenerateInputError",
    "FormatError",
]
