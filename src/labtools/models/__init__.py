"""
Data models for labtools.

This module contains the request, result and configuration structures used
by the file searcher and the permutation generator.
"""

from .search_request import SearchRequest
from .search_results import SearchResult
from .permutation import (
    PermutationStrategy,
    PermutationRequest,
    PermutationResult,
    StrategyTiming,
    count_permutations,
)

__all__ = [
    'SearchRequest',
    'SearchResult',
    'PermutationStrategy',
    'PermutationRequest',
    'PermutationResult',
    'StrategyTiming',
    'count_permutations',
]
