"""
labtools - Core Package

Two small utilities: a recursive file name search across a directory tree
and a string permutation generator with interchangeable strategies.
"""

__version__ = "0.1.0"
__author__ = "labtools Team"
