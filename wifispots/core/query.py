from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .filters import FilterCriteria, HoursBucket, PlaceType, SortMode, WifiQuality

BASE_SQL = "SELECT * FROM places"

ROUND_THE_CLOCK_TOKENS = ("24", "round the clock", "24/7", "24 hours")

LIKE_ESCAPE = "!"

ORDER_BY = {
    SortMode.RATING_DESC: "rating DESC",
    SortMode.RATING_ASC: "rating ASC",
    SortMode.NAME_ASC: "LOWER(name) ASC",
    SortMode.NAME_DESC: "LOWER(name) DESC",
}

_CLOSING_HOURS = {
    HoursBucket.UNTIL_23: "23",
    HoursBucket.UNTIL_20: "20",
}


@dataclass(frozen=True)
class PlaceQuery:
    sql: str
    params: dict[str, Any] = field(default_factory=dict)


def _contains(text: str) -> str:
    return f"%{text}%"


def _contains_literal(text: str) -> str:
    """Wildcard-wrap user text so its own % and _ match literally (ESCAPE '!')."""
    for ch in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(ch, LIKE_ESCAPE + ch)
    return _contains(text)


def _label(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


def hour_boundary_pattern(hour: str) -> str:
    """Regex matching ``hour`` (optionally ``:00``) not glued to a preceding digit."""
    return f"(^|[^0-9]){hour}(:00)?"


def _hours_predicate(bucket: HoursBucket | str, params: dict[str, Any]) -> str | None:
    if bucket == HoursBucket.ANY:
        return None

    if bucket == HoursBucket.ROUND_THE_CLOCK:
        parts = []
        for i, token in enumerate(ROUND_THE_CLOCK_TOKENS):
            params[f"hours_{i}"] = _contains(token)
            parts.append(f"LOWER(work_hours) LIKE :hours_{i}")
        return "(" + " OR ".join(parts) + ")"

    if bucket in _CLOSING_HOURS:
        hour = _CLOSING_HOURS[HoursBucket(bucket)]
        params["hours_num"] = _contains(hour)
        params["hours_until"] = _contains(f"until {hour}")
        params["hours_re"] = hour_boundary_pattern(hour)
        return (
            "(work_hours LIKE :hours_num"
            " OR LOWER(work_hours) LIKE :hours_until"
            " OR LOWER(work_hours) REGEXP :hours_re)"
        )

    params["hours"] = _contains_literal(_label(bucket))
    return f"work_hours LIKE :hours ESCAPE '{LIKE_ESCAPE}'"


def compose_place_query(criteria: FilterCriteria) -> PlaceQuery:
    where: list[str] = []
    params: dict[str, Any] = {}

    term = criteria.search_term()
    if term:
        where.append(
            f"(LOWER(name) LIKE :q ESCAPE '{LIKE_ESCAPE}'"
            f" OR LOWER(address) LIKE :q ESCAPE '{LIKE_ESCAPE}')"
        )
        params["q"] = _contains_literal(term.lower())

    if criteria.place_type != PlaceType.ALL:
        where.append("TRIM(LOWER(type)) = TRIM(LOWER(:type))")
        params["type"] = _label(criteria.place_type)

    if criteria.wifi != WifiQuality.ANY:
        where.append("TRIM(LOWER(wifi_quality)) = TRIM(LOWER(:wifi))")
        params["wifi"] = _label(criteria.wifi)

    hours = _hours_predicate(criteria.hours, params)
    if hours:
        where.append(hours)

    sql = BASE_SQL
    if where:
        sql += " WHERE " + " AND ".join(where)

    order = ORDER_BY.get(SortMode(criteria.sort))
    if order:
        sql += " ORDER BY " + order

    return PlaceQuery(sql=sql, params=params)
