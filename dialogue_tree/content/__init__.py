"""
Authored guide documents and their schema
"""

from .guides import (
    Guide,
    GuideFrontmatter,
    GuideValidator,
    ValidationIssue,
    load_guide,
    load_guides,
    parse_guide,
    split_frontmatter,
)

__all__ = [
    "Guide",
    "GuideFrontmatter",
    "GuideValidator",
    "ValidationIssue",
    "load_guide",
    "load_guides",
    "parse_guide",
    "split_frontmatter",
]
