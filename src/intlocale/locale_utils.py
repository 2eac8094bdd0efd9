"""Locale utilities bridging canonical BCP-47 tags and Babel/CLDR.

BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
Everything here normalizes at the boundary: input is parsed and
canonicalized once, and the canonical form is used for cache keys and
lookups.

Babel-backed functions (get_babel_locale, maximize, minimize,
display_name) raise BabelImportError when Babel is not installed.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, TypeAlias

from intlocale.constants import (
    DEFAULT_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
    POSIX_SEPARATOR,
    SUBTAG_SEPARATOR,
    UND,
)
from intlocale.core.babel_compat import get_likely_subtags, get_locale_class
from intlocale.diagnostics import LocaleError
from intlocale.runtime.locale import Locale
from intlocale.syntax.canonicalizer import canonicalize
from intlocale.syntax.parser import clear_parse_cache
from intlocale.syntax.tag import LanguageTag

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "display_name",
    "get_babel_locale",
    "get_system_locale",
    "maximize",
    "minimize",
    "normalize_locale",
    "to_posix",
]

logger = logging.getLogger(__name__)

_Triple: TypeAlias = tuple[str, str | None, str | None]

_PSEUDO_LOCALES = frozenset({"C", "POSIX"})
_ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")

# (keep script, keep region) per lookup attempt.
_LIKELY_LOOKUP_ORDER = ((True, True), (False, True), (True, False), (False, False))


def normalize_locale(locale_code: str | Locale) -> str:
    """Canonical BCP-47 form of a locale code (POSIX underscores accepted).

    Raises:
        LocaleError: If the code is not a well-formed tag

    Example:
        >>> normalize_locale("EN_us")
        'en-US'
        >>> normalize_locale("iw-il")
        'he-IL'
    """
    if isinstance(locale_code, Locale):
        return locale_code.as_bcp47()
    return Locale(locale_code.replace(POSIX_SEPARATOR, SUBTAG_SEPARATOR)).as_bcp47()


def to_posix(locale_code: str | Locale) -> str:
    """Convert to the POSIX form Babel expects, without extensions.

    Example:
        >>> to_posix("zh-Hant-TW")
        'zh_Hant_TW'
        >>> to_posix("en-US-u-hc-h23")
        'en_US'
    """
    if isinstance(locale_code, Locale):
        locale = locale_code
    else:
        locale = Locale(locale_code.replace(POSIX_SEPARATOR, SUBTAG_SEPARATOR))
    return locale.base_name.replace(SUBTAG_SEPARATOR, POSIX_SEPARATOR)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _babel_locale(posix_code: str) -> BabelLocale:
    logger.debug("Loading Babel locale %s", posix_code)
    return get_locale_class().parse(posix_code)


def get_babel_locale(locale_code: str | Locale) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Parses the locale code once per canonical form and caches the result.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        LocaleError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    return _babel_locale(to_posix(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Encoding (".UTF-8") and modifier ("@euro") suffixes are stripped, the
    "C" and "POSIX" pseudo-locales are ignored, and values that are not
    well-formed tags are logged and skipped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE.

    Returns:
        Canonical BCP-47 tag, e.g. "de-DE"

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-DE'
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[tuple[str, str]] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidates.append(("locale.getlocale()", system_locale))
    candidates.extend(
        (var, value) for var in _ENVIRONMENT_VARIABLES if (value := os.environ.get(var))
    )

    for source, value in candidates:
        code = value.split(".")[0].split("@")[0]
        if not code or code in _PSEUDO_LOCALES:
            continue
        try:
            return normalize_locale(code)
        except LocaleError as exc:
            logger.warning("Ignoring unparseable locale %r from %s: %s", value, source, exc)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE


# ============================================================================
# LIKELY SUBTAGS
# ============================================================================


def _lookup_likely(language: str, script: str | None, region: str | None) -> _Triple | None:
    """CLDR likely-subtags lookup in UTS #35 order.

    Tries language_script_region, language_region, language_script,
    language, then the same with "und" as the language.
    """
    likely = get_likely_subtags()
    languages = (language,) if language == UND else (language, UND)
    for lang in languages:
        for keep_script, keep_region in _LIKELY_LOOKUP_ORDER:
            if (keep_script and script is None) or (keep_region and region is None):
                continue
            parts = [lang]
            if keep_script:
                parts.append(str(script))
            if keep_region:
                parts.append(str(region))
            found = likely.get(POSIX_SEPARATOR.join(parts))
            if found is None:
                continue
            matched_language, matched_script, matched_region = found.split(POSIX_SEPARATOR)
            return (
                language if language != UND else matched_language,
                script or matched_script,
                region or matched_region,
            )
    return None


def _maximal(tag: LanguageTag) -> _Triple | None:
    if tag.grandfathered is not None or tag.is_private_use:
        return None
    return _lookup_likely(tag.language, tag.script, tag.region)


def maximize(tag: LanguageTag | str) -> LanguageTag:
    """Add likely script and region (UTS #35 "Add Likely Subtags").

    Variants, extensions and private use are kept. Tags CLDR knows nothing
    about, legacy tags and private-use-only tags are returned canonical but
    otherwise unchanged.

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> str(maximize("zh-TW"))
        'zh-Hant-TW'
        >>> str(maximize("und"))
        'en-Latn-US'
    """
    canonical = canonicalize(tag) if isinstance(tag, LanguageTag) else Locale(tag).tag
    found = _maximal(canonical)
    if found is None:
        return canonical
    language, script, region = found
    logger.debug("Maximized %s to %s-%s-%s", canonical, language, script, region)
    return canonicalize(canonical.replace(language=language, script=script, region=region))


def minimize(tag: LanguageTag | str) -> LanguageTag:
    """Remove script and region that maximize() would add back.

    Tries the bare language, then language-region, then language-script
    (UTS #35 "Remove Likely Subtags"), so the region is kept in
    preference to the script.

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> str(minimize("zh-Hant-TW"))
        'zh-TW'
        >>> str(minimize("en-Latn-US"))
        'en'
    """
    canonical = canonicalize(tag) if isinstance(tag, LanguageTag) else Locale(tag).tag
    full = _maximal(canonical)
    if full is None:
        return canonical
    language, script, region = full
    for trial_script, trial_region in ((None, None), (None, region), (script, None)):
        if _lookup_likely(language, trial_script, trial_region) == full:
            logger.debug("Minimized %s", canonical)
            return canonical.replace(language=language, script=trial_script, region=trial_region)
    return canonical.replace(language=language, script=script, region=region)


# ============================================================================
# DISPLAY NAMES
# ============================================================================


def display_name(locale_code: str | Locale, in_locale: str | Locale | None = None) -> str | None:
    """Localized name of a locale from CLDR, e.g. "Deutsch (Schweiz)".

    Args:
        locale_code: Locale to describe
        in_locale: Locale to render the name in (defaults to locale_code)

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> display_name("de-CH", "en")
        'German (Switzerland)'
    """
    target = get_babel_locale(locale_code)
    if in_locale is None:
        return target.get_display_name()
    return target.get_display_name(get_babel_locale(in_locale))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache and the tag parse cache."""
    _babel_locale.cache_clear()
    clear_parse_cache()
