"""Units, constants, RANLUX++ random numbers, benchmarking and calorimeter scoring for particle transport."""

__version__ = "0.1.0"

__all__ = [
    "backend",
    "benchmarking",
    "constants",
    "geometry",
    "hits",
    "nvtx",
    "ranlux_math",
    "ranluxpp",
    "units",
]