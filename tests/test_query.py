from wifispots.core.filters import (
    SEARCH_PLACEHOLDER,
    FilterCriteria,
    HoursBucket,
    PlaceType,
    SortMode,
    WifiQuality,
)
from wifispots.core.query import ROUND_THE_CLOCK_TOKENS, compose_place_query


def test_empty_criteria_selects_everything_unordered():
    q = compose_place_query(FilterCriteria())
    assert q.sql == "SELECT * FROM places"
    assert q.params == {}


def test_placeholder_and_blank_search_are_ignored():
    for search in (None, "", "   ", SEARCH_PLACEHOLDER):
        q = compose_place_query(FilterCriteria(search=search))
        assert q.sql == "SELECT * FROM places"
        assert q.params == {}


def test_search_matches_name_or_address_with_wildcards():
    q = compose_place_query(FilterCriteria(search="  Caf "))
    assert "(LOWER(name) LIKE :q ESCAPE '!' OR LOWER(address) LIKE :q ESCAPE '!')" in q.sql
    assert q.params == {"q": "%caf%"}


def test_type_and_wifi_are_trimmed_case_insensitive_equalities():
    q = compose_place_query(FilterCriteria(place_type=PlaceType.CAFE, wifi=WifiQuality.GOOD))
    assert "TRIM(LOWER(type)) = TRIM(LOWER(:type))" in q.sql
    assert "TRIM(LOWER(wifi_quality)) = TRIM(LOWER(:wifi))" in q.sql
    assert q.params == {"type": "Cafe", "wifi": "Good"}
    assert " AND " in q.sql


def test_free_text_type_label_is_bound_verbatim():
    q = compose_place_query(FilterCriteria(place_type="Bookshop"))
    assert q.params == {"type": "Bookshop"}


def test_round_the_clock_bucket_is_a_disjunction_of_all_tokens():
    q = compose_place_query(FilterCriteria(hours=HoursBucket.ROUND_THE_CLOCK))
    assert q.sql.count("LOWER(work_hours) LIKE") == len(ROUND_THE_CLOCK_TOKENS)
    assert q.sql.count(" OR ") == len(ROUND_THE_CLOCK_TOKENS) - 1
    assert sorted(q.params.values()) == sorted(f"%{t}%" for t in ROUND_THE_CLOCK_TOKENS)


def test_until_bucket_uses_substring_phrase_and_regex():
    q = compose_place_query(FilterCriteria(hours=HoursBucket.UNTIL_20))
    assert "REGEXP :hours_re" in q.sql
    assert q.params == {
        "hours_num": "%20%",
        "hours_until": "%until 20%",
        "hours_re": "(^|[^0-9])20(:00)?",
    }


def test_other_hours_label_is_a_generic_substring_predicate():
    q = compose_place_query(FilterCriteria(hours="Weekends"))
    assert q.sql == "SELECT * FROM places WHERE work_hours LIKE :hours ESCAPE '!'"
    assert q.params == {"hours": "%Weekends%"}


def test_sort_modes_map_to_single_column_order_by():
    expected = {
        SortMode.NATURAL: None,
        SortMode.RATING_DESC: "ORDER BY rating DESC",
        SortMode.RATING_ASC: "ORDER BY rating ASC",
        SortMode.NAME_ASC: "ORDER BY LOWER(name) ASC",
        SortMode.NAME_DESC: "ORDER BY LOWER(name) DESC",
    }
    for mode, order in expected.items():
        sql = compose_place_query(FilterCriteria(sort=mode)).sql
        if order is None:
            assert "ORDER BY" not in sql
        else:
            assert sql.endswith(order)


def test_user_literals_never_reach_the_sql_text():
    nasty = "x'; DROP TABLE places; --"
    q = compose_place_query(
        FilterCriteria(search=nasty, place_type=nasty, wifi=nasty, hours=nasty)
    )
    assert "DROP" not in q.sql
    assert nasty not in q.sql
    assert set(q.params.values()) >= {nasty, "%x'; drop table places; --%"}


def test_like_wildcards_in_user_text_are_escaped():
    q = compose_place_query(FilterCriteria(search="50%_off!", hours="9_%"))
    assert q.params["q"] == "%50!%!_off!!%"
    assert q.params["hours"] == "%9!_!%%"


def test_composition_is_deterministic():
    criteria = FilterCriteria(
        search="caf",
        place_type=PlaceType.LIBRARY,
        wifi=WifiQuality.EXCELLENT,
        hours=HoursBucket.ROUND_THE_CLOCK,
        sort=SortMode.RATING_DESC,
    )
    a, b = compose_place_query(criteria), compose_place_query(criteria)
    assert a.sql == b.sql
    assert list(a.params.items()) == list(b.params.items())
