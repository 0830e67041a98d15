from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SEARCH_PLACEHOLDER = "Search..."


class PlaceType(str, Enum):
    ALL = "all"
    CAFE = "Cafe"
    LIBRARY = "Library"
    COWORKING = "Coworking"
    LOUNGE = "Lounge"

    @property
    def label(self) -> str:
        return "All types" if self is PlaceType.ALL else self.value


class WifiQuality(str, Enum):
    ANY = "any"
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def label(self) -> str:
        return "Any" if self is WifiQuality.ANY else self.value


class HoursBucket(str, Enum):
    ANY = "any"
    ROUND_THE_CLOCK = "24h"
    UNTIL_23 = "until-23"
    UNTIL_20 = "until-20"

    @property
    def label(self) -> str:
        return _HOURS_LABELS[self]


_HOURS_LABELS = {
    HoursBucket.ANY: "Any hours",
    HoursBucket.ROUND_THE_CLOCK: "Round the clock",
    HoursBucket.UNTIL_23: "Until 23:00",
    HoursBucket.UNTIL_20: "Until 20:00",
}


class SortMode(str, Enum):
    NATURAL = "natural"
    RATING_DESC = "rating-desc"
    RATING_ASC = "rating-asc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"


@dataclass(frozen=True)
class FilterCriteria:
    """Independent, optional search dimensions over the place catalog.

    ``place_type``, ``wifi`` and ``hours`` take either their enum (whose sentinel
    member means "no filter") or a free-text label stored in the catalog.
    """

    search: str | None = None
    place_type: PlaceType | str = PlaceType.ALL
    wifi: WifiQuality | str = WifiQuality.ANY
    hours: HoursBucket | str = HoursBucket.ANY
    sort: SortMode = SortMode.NATURAL

    def search_term(self) -> str | None:
        if self.search is None:
            return None
        term = self.search.strip()
        if not term or term == SEARCH_PLACEHOLDER:
            return None
        return term
