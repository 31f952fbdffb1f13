from .combinations import (
    Combination,
    CombinationEnumerator,
    enumerate_combinations,
    triangle_number,
)

__all__ = [
    "Combination",
    "CombinationEnumerator",
    "enumerate_combinations",
    "triangle_number",
]
