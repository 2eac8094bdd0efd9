"""Enumerations for intlocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Slot(StrEnum):
    """Grammar slot of a BCP-47 language tag, in tag order.

    StrEnum provides automatic string conversion: str(Slot.REGION) == "region"
    """

    LANGUAGE = "language"
    """Primary language subtag: en, zh, gsw"""

    EXTLANG = "extlang"
    """Extended language subtag: zh-yue"""

    SCRIPT = "script"
    """Script subtag: Latn, Hant"""

    REGION = "region"
    """Region subtag: US, 419"""

    VARIANT = "variant"
    """Variant subtag: valencia, 1996"""

    EXTENSION = "extension"
    """Singleton-introduced extension: u-ca-gregory"""

    PRIVATEUSE = "privateuse"
    """Private-use sequence: x-whatever"""

    @property
    def order(self) -> int:
        """Position of this slot in the tag grammar (0 = language)."""
        return _SLOT_ORDER[self]


_SLOT_ORDER: dict[Slot, int] = {slot: index for index, slot in enumerate(Slot)}


class OptionField(StrEnum):
    """Locale constructor option names.

    StrEnum provides automatic string conversion: str(OptionField.HOUR_CYCLE) == "hour_cycle"
    """

    SCRIPT = "script"
    """Script override: replaces the tag's script subtag"""

    REGION = "region"
    """Region override: replaces the tag's region subtag"""

    HOUR_CYCLE = "hour_cycle"
    """Hour cycle preference, serialized as the -u-hc- keyword"""

    CALENDAR = "calendar"
    """Calendar preference, serialized as the -u-ca- keyword"""


class HourCycle(StrEnum):
    """Unicode hour cycle keyword values (UTS #35 "hc" key).

    StrEnum provides automatic string conversion: str(HourCycle.H12) == "h12"
    """

    H11 = "h11"
    """12-hour clock starting at 0 (0:00 - 11:59)"""

    H12 = "h12"
    """12-hour clock starting at 1 (12:00 - 11:59)"""

    H23 = "h23"
    """24-hour clock starting at 0 (0:00 - 23:59)"""

    H24 = "h24"
    """24-hour clock starting at 1 (1:00 - 24:59)"""


__all__ = [
    "HourCycle",
    "OptionField",
    "Slot",
]
