"""
gitsource: git repository acquisition and GitHub raw-content URLs.

Clones remote repositories with optional credentials and revision,
classifies clone and checkout failures, and converts GitHub browse
links into raw file links.
"""

__version__ = "1.0.0"
__author__ = "gitsource"
