"""
Search and generation tools for labtools.

This module contains the recursive file name searcher and the string
permutation generator.
"""
