"""Hypothesis strategies for intlocale property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- tags: Per-slot subtags, well-formed and malformed tag strings

Usage:
    from tests.strategies import well_formed_tags, malformed_tags
    from tests.strategies.tags import variant_subtags, region_subtags

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - well_formed_tags, malformed_tags
"""

from .tags import (
    SAMPLE_TAGS,
    extension_sequences,
    extension_values,
    extlang_subtags,
    language_subtags,
    malformed_tags,
    privateuse_values,
    region_subtags,
    sample_tags,
    script_subtags,
    singletons,
    variant_lists,
    variant_subtags,
    well_formed_tags,
)

__all__ = [
    "SAMPLE_TAGS",
    "extension_sequences",
    "extension_values",
    "extlang_subtags",
    "language_subtags",
    "malformed_tags",
    "privateuse_values",
    "region_subtags",
    "sample_tags",
    "script_subtags",
    "singletons",
    "variant_lists",
    "variant_subtags",
    "well_formed_tags",
]
