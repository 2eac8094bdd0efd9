"""Locale runtime package.

Provides the immutable Locale object, constructor options and the options
merger, and Unicode extension keyword handling. Depends on the syntax
package for parsing and canonicalization.

Python 3.13+.
"""

from .extensions import UnicodeExtension, get_unicode_keyword, with_unicode_keywords
from .locale import Locale
from .options import Calendar, HourCycle, MergeResult, Opt, Region, Script, apply_options, merge

__all__ = [
    "Calendar",
    "HourCycle",
    "Locale",
    "MergeResult",
    "Opt",
    "Region",
    "Script",
    "UnicodeExtension",
    "apply_options",
    "get_unicode_keyword",
    "merge",
    "with_unicode_keywords",
]
