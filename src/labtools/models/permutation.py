"""
Permutation data models for labtools.

This module defines the strategy selector, the validated generation request,
and the result and timing records returned by the permutation generator.
"""

from collections import Counter
from enum import Enum
from math import factorial
from typing import Dict, List, Tuple, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PermutationStrategy(Enum):
    """Enumeration of the permutation generation algorithms."""
    SWAP = "swap"
    HEAP = "heap"
    PREFIX = "prefix"


def count_permutations(text: str, include_duplicates: bool = True) -> int:
    """
    Compute how many permutations a generator should return for ``text``.

    Args:
        text: Input string
        include_duplicates: If True count every ordering (n!), otherwise
            only distinct strings (n! divided by the factorial of each
            character's multiplicity)

    Returns:
        Expected number of permutations
    """
    total = factorial(len(text))
    if include_duplicates:
        return total

    for multiplicity in Counter(text).values():
        total //= factorial(multiplicity)
    return total


class PermutationRequest(BaseModel):
    """
    A single permutation generation request.

    Attributes:
        text: Input string (may be empty, never None)
        include_duplicates: Whether repeated strings are kept
        strategy: Algorithm used to generate the orderings
    """

    text: str = Field(..., description="Input string to permute")
    include_duplicates: bool = Field(True, description="Keep repeated permutations")
    strategy: PermutationStrategy = Field(PermutationStrategy.SWAP, description="Generation algorithm")

    @field_validator('strategy', mode='before')
    @classmethod
    def validate_strategy(cls, v) -> PermutationStrategy:
        """Ensure strategy is a PermutationStrategy enum."""
        if isinstance(v, str):
            try:
                return PermutationStrategy(v.lower())
            except ValueError:
                raise ValueError(f"Invalid permutation strategy: {v}")
        return v


class PermutationResult(BaseModel):
    """
    Outcome of one permutation generation.

    Attributes:
        text: The input string
        strategy: Algorithm that produced the permutations
        include_duplicates: Whether repeated strings were kept
        permutations: Generated strings, in generation order
        raw_count: Number of strings before duplicate filtering
        elapsed_seconds: Wall-clock generation time
    """

    model_config = ConfigDict(frozen=True)

    text: str
    strategy: PermutationStrategy
    include_duplicates: bool = True
    permutations: Tuple[str, ...] = Field(default_factory=tuple)
    raw_count: int = Field(0, ge=0)
    elapsed_seconds: float = Field(0.0, ge=0.0)

    def get_count(self) -> int:
        """Get the number of permutations returned."""
        return len(self.permutations)

    def get_expected_count(self) -> int:
        """Get the count implied by the input's length and multiplicities."""
        return count_permutations(self.text, self.include_duplicates)

    def is_complete(self) -> bool:
        """Check the returned count against the expected count."""
        return self.get_count() == self.get_expected_count()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to dictionary representation."""
        data = self.model_dump()
        data['strategy'] = self.strategy.value
        data['permutations'] = list(self.permutations)
        data['count'] = self.get_count()
        return data

    def __str__(self) -> str:
        parts = [f"'{self.text}'"]
        parts.append(f"Strategy: {self.strategy.value}")
        parts.append(f"Permutations: {self.get_count()}")
        parts.append(f"Took {self.elapsed_seconds * 1000:.3f} ms")
        return " | ".join(parts)


class StrategyTiming(BaseModel):
    """Timing of one strategy in a strategy comparison."""

    strategy: PermutationStrategy
    count: int = Field(..., ge=0)
    elapsed_seconds: float = Field(..., ge=0.0)

    def get_elapsed_ms(self) -> float:
        return self.elapsed_seconds * 1000.0


def get_fastest(timings: List[StrategyTiming]) -> StrategyTiming:
    """Get the timing entry with the smallest elapsed time."""
    return min(timings, key=lambda t: t.elapsed_seconds)
