"""
Recipe AI core package.

Recipe discovery backed by a generative AI provider: structured recipe text,
one generated photo per recipe, favorites, portion scaling and sharing.
"""

__version__ = "1.0.0"
