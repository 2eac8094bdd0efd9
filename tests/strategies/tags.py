"""Hypothesis strategies for BCP-47 language tags.

Generates subtags per grammar slot and assembles them into well-formed tag
strings with randomized case. Grandfathered tags are filtered out so that
generated strings always go through the regular grammar.

Event-Emitting Strategies (HypoFuzz-Optimized):
- well_formed_tags: Emits tag_shape=bare|scripted|regional|full
- malformed_tags: Emits malformation=<kind>

Usage:
    from hypothesis import given
    from tests.strategies.tags import well_formed_tags

    @given(raw=well_formed_tags())
    def test_parse(raw):
        ...

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from intlocale.core.registry import lookup_grandfathered

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# ============================================================================
# SUBTAGS
# ============================================================================

_ALNUM = string.ascii_letters + string.digits


def _mixed_case(pattern: str) -> SearchStrategy[str]:
    return st.from_regex(pattern, fullmatch=True)


language_subtags: SearchStrategy[str] = st.one_of(
    _mixed_case(r"[a-zA-Z]{2,3}"),
    _mixed_case(r"[a-zA-Z]{5,8}"),
)

extlang_subtags: SearchStrategy[str] = _mixed_case(r"[a-zA-Z]{3}")

script_subtags: SearchStrategy[str] = _mixed_case(r"[a-zA-Z]{4}")

region_subtags: SearchStrategy[str] = st.one_of(
    _mixed_case(r"[a-zA-Z]{2}"),
    _mixed_case(r"[0-9]{3}"),
)

variant_subtags: SearchStrategy[str] = st.one_of(
    _mixed_case(r"[a-zA-Z0-9]{5,8}"),
    _mixed_case(r"[0-9][a-zA-Z0-9]{3}"),
)

singletons: SearchStrategy[str] = st.sampled_from(
    [c for c in string.ascii_lowercase + string.digits if c != "x"]
)

extension_values: SearchStrategy[str] = _mixed_case(r"[a-zA-Z0-9]{2,8}")

privateuse_values: SearchStrategy[str] = _mixed_case(r"[a-zA-Z0-9]{1,8}")

# Real-world tags covering every slot, aliases and legacy forms.
SAMPLE_TAGS = [
    "en",
    "en-US",
    "zh-Hant-TW",
    "sr-Latn-RS",
    "es-419",
    "de-CH-1996",
    "sl-rozaj-biske",
    "hy-Latn-IT-arevela",
    "zh-yue-HK",
    "en-US-u-ca-gregory-hc-h12",
    "de-DE-u-co-phonebk",
    "en-a-myext-b-another",
    "en-US-x-twain",
    "x-whatever",
    "qaa-Qaaa-QM-x-southern",
    "i-klingon",
    "en-GB-oed",
    "zh-min-nan",
    "iw-IL",
    "und",
]

sample_tags: SearchStrategy[str] = st.sampled_from(SAMPLE_TAGS)


# ============================================================================
# WELL-FORMED TAGS
# ============================================================================


@composite
def extension_sequences(
    draw: DrawFn, *, allow_unicode: bool = True
) -> list[tuple[str, list[str]]]:
    """Generate extension sequences with unique singletons."""
    pool = singletons if allow_unicode else singletons.filter(lambda s: s != "u")
    return draw(
        st.lists(
            st.tuples(pool, st.lists(extension_values, min_size=1, max_size=3)),
            max_size=2,
            unique_by=lambda item: item[0].lower(),
        )
    )


@composite
def well_formed_tags(draw: DrawFn, *, allow_unicode: bool = True) -> str:
    """Generate a well-formed, non-grandfathered BCP-47 tag string.

    Events emitted:
    - tag_shape={bare|scripted|regional|full}

    Args:
        allow_unicode: Include -u- extensions (Locale validates hc/ca values
            in them, so Locale-level tests pass False)
    """
    language = draw(language_subtags)
    parts = [language]
    if len(language) <= 3:
        parts.extend(draw(st.lists(extlang_subtags, max_size=1)))
    script = draw(st.none() | script_subtags)
    if script is not None:
        parts.append(script)
    region = draw(st.none() | region_subtags)
    if region is not None:
        parts.append(region)
    variants = draw(st.lists(variant_subtags, max_size=3, unique_by=str.lower))
    parts.extend(variants)
    for singleton, values in draw(extension_sequences(allow_unicode=allow_unicode)):
        parts.append(singleton)
        parts.extend(values)
    privateuse = draw(st.lists(privateuse_values, max_size=2))
    if privateuse:
        parts.append("x")
        parts.extend(privateuse)

    if len(parts) == 1:
        event("tag_shape=bare")
    elif variants or len(parts) > 3:
        event("tag_shape=full")
    elif region is not None:
        event("tag_shape=regional")
    else:
        event("tag_shape=scripted")

    raw = "-".join(parts)
    if lookup_grandfathered(raw) is not None:
        raw = f"{raw}-x-gen"
    return raw


@composite
def variant_lists(draw: DrawFn) -> list[str]:
    """Unique (case-insensitive) variant lists in arbitrary order."""
    return draw(st.lists(variant_subtags, max_size=4, unique_by=str.lower))


# ============================================================================
# MALFORMED TAGS
# ============================================================================


@composite
def malformed_tags(draw: DrawFn) -> str:
    """Generate a tag string that must be rejected.

    Events emitted:
    - malformation={empty_subtag|too_long_subtag|bad_char|no_language|double_region}
    """
    kind = draw(
        st.sampled_from(
            ["empty_subtag", "too_long_subtag", "bad_char", "no_language", "double_region"]
        )
    )
    event(f"malformation={kind}")
    language = draw(_mixed_case(r"[a-z]{2,3}"))
    match kind:
        case "empty_subtag":
            return draw(st.sampled_from([f"{language}--US", f"-{language}", f"{language}-"]))
        case "too_long_subtag":
            return f"{language}-{draw(_mixed_case(r'[a-z]{9,12}'))}"
        case "bad_char":
            return f"{language}-{draw(st.sampled_from(['US!', 'é', 'a b', 'a_b']))}"
        case "no_language":
            return f"{draw(_mixed_case(r'[0-9]{1,3}'))}-{language}"
        case _:
            return f"{language}-US-{draw(_mixed_case(r'[A-Z]{2}'))}"
