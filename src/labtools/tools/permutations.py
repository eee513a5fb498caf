"""
String permutation generator for labtools.

This module produces every ordering of a string's characters with three
interchangeable algorithms:

- swap backtracking: fix positions left to right by swapping candidates in
  and restoring the order after each recursive step
- Heap's algorithm: iterative, one swap between consecutive permutations
- prefix recursion: grow a prefix from the characters not yet used

All three yield the same set of strings for the same input, n! of them.
Duplicate filtering keeps the first occurrence of each distinct string.
"""

import time
from typing import Callable, Dict, List, Optional, Union
import logging

from pydantic import ValidationError

from ..errors import InvalidArgumentError
from ..models.permutation import (
    PermutationRequest,
    PermutationResult,
    PermutationStrategy,
    StrategyTiming,
    count_permutations,
)


logger = logging.getLogger(__name__)


def get_strategy(strategy: Union[str, PermutationStrategy]) -> PermutationStrategy:
    """
    Resolve a strategy name or enum member.

    Args:
        strategy: ``"swap"``, ``"heap"``, ``"prefix"`` or a PermutationStrategy

    Returns:
        The matching PermutationStrategy

    Raises:
        InvalidArgumentError: If the name is not a known strategy
    """
    if isinstance(strategy, PermutationStrategy):
        return strategy
    try:
        return PermutationStrategy(str(strategy).lower())
    except ValueError:
        valid = ", ".join(s.value for s in PermutationStrategy)
        raise InvalidArgumentError(f"Invalid permutation strategy: {strategy}. Must be one of: {valid}")


def _validate_text(text) -> str:
    if text is None:
        raise InvalidArgumentError("Input string cannot be null")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Input must be a string, got {type(text).__name__}")
    return text


class PermutationGenerator:
    """
    Generates all permutations of a string.

    The raw strategy methods (``swap_backtracking``, ``heap_iterative``,
    ``prefix_recursive``) always return every ordering, repeats included.
    ``generate`` selects a strategy and applies ``filter_duplicates`` when
    duplicates are excluded.
    """

    def __init__(self, include_duplicates: bool = True):
        """
        Initialize the permutation generator.

        Args:
            include_duplicates: Default for ``generate`` when the call does not say
        """
        self.include_duplicates = include_duplicates
        self._strategies: Dict[PermutationStrategy, Callable[[str], List[str]]] = {
            PermutationStrategy.SWAP: self.swap_backtracking,
            PermutationStrategy.HEAP: self.heap_iterative,
            PermutationStrategy.PREFIX: self.prefix_recursive,
        }

    def generate(self, text: Optional[str], include_duplicates: Optional[bool] = None,
                 strategy: Union[str, PermutationStrategy] = PermutationStrategy.SWAP) -> List[str]:
        """
        Generate the permutations of a string.

        Args:
            text: Input string; empty input yields ``[""]``
            include_duplicates: Overrides the instance default for this call
            strategy: Algorithm to use

        Returns:
            List of permutations in the strategy's generation order

        Raises:
            InvalidArgumentError: If text is None or the strategy is unknown
        """
        text = _validate_text(text)
        generate_raw = self._strategies[get_strategy(strategy)]
        if include_duplicates is None:
            include_duplicates = self.include_duplicates

        permutations = generate_raw(text)
        if not include_duplicates:
            return self.filter_duplicates(permutations)
        return permutations

    def run(self, request: PermutationRequest) -> PermutationResult:
        """
        Execute a permutation request and time it.

        Args:
            request: Validated generation request

        Returns:
            PermutationResult with the permutations and the elapsed time
        """
        generate_raw = self._strategies[request.strategy]

        start = time.perf_counter()
        raw = generate_raw(request.text)
        permutations = raw if request.include_duplicates else self.filter_duplicates(raw)
        elapsed = time.perf_counter() - start

        logger.debug(f"{request.strategy.value}: {len(permutations)} permutations of "
                     f"'{request.text}' in {elapsed:.6f}s")

        return PermutationResult(
            text=request.text,
            strategy=request.strategy,
            include_duplicates=request.include_duplicates,
            permutations=tuple(permutations),
            raw_count=len(raw),
            elapsed_seconds=elapsed
        )

    def compare_strategies(self, text: Optional[str],
                           include_duplicates: Optional[bool] = None) -> List[StrategyTiming]:
        """
        Time every strategy on the same input.

        Args:
            text: Input string
            include_duplicates: Overrides the instance default for this call

        Returns:
            One StrategyTiming per strategy, in enum order
        """
        text = _validate_text(text)
        if include_duplicates is None:
            include_duplicates = self.include_duplicates

        timings = []
        for strategy in PermutationStrategy:
            result = self.run(self.build_request(text, include_duplicates, strategy))
            timings.append(StrategyTiming(
                strategy=strategy,
                count=result.get_count(),
                elapsed_seconds=result.elapsed_seconds
            ))
        return timings

    def build_request(self, text: Optional[str], include_duplicates: Optional[bool] = None,
                      strategy: Union[str, PermutationStrategy] = PermutationStrategy.SWAP) -> PermutationRequest:
        """
        Validate raw arguments into a PermutationRequest.

        Raises:
            InvalidArgumentError: If text is None or the strategy is unknown
        """
        text = _validate_text(text)
        try:
            return PermutationRequest(
                text=text,
                include_duplicates=self.include_duplicates if include_duplicates is None else include_duplicates,
                strategy=get_strategy(strategy)
            )
        except ValidationError as e:
            messages = "; ".join(error['msg'] for error in e.errors())
            raise InvalidArgumentError(messages) from e

    def swap_backtracking(self, text: Optional[str]) -> List[str]:
        """
        Generate permutations by swapping characters into place and backtracking.

        Args:
            text: Input string

        Returns:
            All n! orderings, repeats included
        """
        text = _validate_text(text)
        if not text:
            return [""]

        chars = list(text)
        result: List[str] = []
        self._swap_helper(chars, 0, result)
        return result

    def _swap_helper(self, chars: List[str], index: int, result: List[str]) -> None:
        if index == len(chars) - 1:
            result.append("".join(chars))
            return

        for i in range(index, len(chars)):
            chars[index], chars[i] = chars[i], chars[index]
            self._swap_helper(chars, index + 1, result)
            chars[index], chars[i] = chars[i], chars[index]

    def heap_iterative(self, text: Optional[str]) -> List[str]:
        """
        Generate permutations with Heap's algorithm, iteratively.

        Consecutive permutations differ by a single swap: position 0 for
        even indices, position ``counters[i]`` for odd ones.

        Args:
            text: Input string

        Returns:
            All n! orderings, repeats included
        """
        text = _validate_text(text)
        if not text:
            return [""]

        chars = list(text)
        n = len(chars)
        counters = [0] * n
        result = ["".join(chars)]

        i = 0
        while i < n:
            if counters[i] < i:
                j = 0 if i % 2 == 0 else counters[i]
                chars[j], chars[i] = chars[i], chars[j]
                result.append("".join(chars))
                counters[i] += 1
                i = 0
            else:
                counters[i] = 0
                i += 1

        return result

    def prefix_recursive(self, text: Optional[str]) -> List[str]:
        """
        Generate permutations by appending each unused character to a prefix.

        Args:
            text: Input string

        Returns:
            All n! orderings, repeats included
        """
        text = _validate_text(text)
        if not text:
            return [""]

        result: List[str] = []
        self._prefix_helper("", text, result)
        return result

    def _prefix_helper(self, prefix: str, remaining: str, result: List[str]) -> None:
        if not remaining:
            result.append(prefix)
            return

        for i, char in enumerate(remaining):
            self._prefix_helper(prefix + char, remaining[:i] + remaining[i + 1:], result)

    @staticmethod
    def filter_duplicates(permutations: List[str]) -> List[str]:
        """
        Remove repeated strings, keeping the first occurrence of each.

        Args:
            permutations: Strings in generation order

        Returns:
            Distinct strings in first-occurrence order
        """
        return list(dict.fromkeys(permutations))


def generate_permutations(text: Optional[str], include_duplicates: bool = True,
                          strategy: Union[str, PermutationStrategy] = PermutationStrategy.SWAP) -> List[str]:
    """
    Convenience function to generate permutations with a single call.

    Args:
        text: Input string
        include_duplicates: Keep repeated permutations
        strategy: Algorithm to use

    Returns:
        List of permutations
    """
    return PermutationGenerator(include_duplicates=include_duplicates).generate(text, strategy=strategy)


__all__ = [
    'PermutationGenerator',
    'generate_permutations',
    'get_strategy',
    'count_permutations',
]
