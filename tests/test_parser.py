"""Tests for year, month and season filter parsing."""

from travel_log.search.parser import (
    normalize_query,
    parse_filters,
    parse_month,
    parse_season,
    parse_year,
)


class TestParseMonth:
    def test_full_names(self):
        assert parse_month('january') == 0
        assert parse_month('december') == 11

    def test_abbreviations(self):
        assert parse_month('jan') == 0
        assert parse_month('dec') == 11

    def test_case_insensitive(self):
        assert parse_month('JANUARY') == 0
        assert parse_month('Jan') == 0

    def test_no_month(self):
        assert parse_month('invalid') is None
        assert parse_month('') is None

    def test_within_sentence(self):
        assert parse_month('I traveled in June') == 5
        assert parse_month('I went to paris in january') == 0
        assert parse_month('summer june vacation') == 5

    def test_september_variations(self):
        assert parse_month('september') == 8
        assert parse_month('sep') == 8
        assert parse_month('sept') == 8

    def test_substring_containment_misfires(self):
        assert parse_month('maybe') == 4
        assert parse_month('marathon') == 2

    def test_first_keyword_in_table_order_wins(self):
        # December appears first in the text, but January is checked first
        assert parse_month('december to january') == 0


class TestParseSeason:
    def test_each_season(self):
        assert parse_season('spring') == [2, 3, 4]
        assert parse_season('summer') == [5, 6, 7]
        assert parse_season('fall') == [8, 9, 10]
        assert parse_season('autumn') == [8, 9, 10]
        assert parse_season('winter') == [11, 0, 1]

    def test_no_season(self):
        assert parse_season('invalid') is None
        assert parse_season('') is None

    def test_within_sentence(self):
        assert parse_season('I love summer vacations') == [5, 6, 7]

    def test_substring_containment(self):
        assert parse_season('waterfall') == [8, 9, 10]


class TestParseYear:
    def test_year_literals(self):
        assert parse_year('back in 1999') == 1999
        assert parse_year('2099') == 2099

    def test_first_year_wins(self):
        assert parse_year('2023 or 2024') == 2023

    def test_requires_word_boundaries(self):
        assert parse_year('12023') is None
        assert parse_year('1850') is None
        assert parse_year('abc') is None


class TestParseFilters:
    def test_normalizes_text(self):
        parsed = parse_filters('  SUMMER 2023 ')
        assert parsed.text == 'summer 2023'
        assert parsed.year_filter == 2023
        assert parsed.month_filter is None
        assert parsed.season_filter == (5, 6, 7)

    def test_month_takes_precedence_over_season(self):
        parsed = parse_filters('June summer')
        assert parsed.month_filter == 5
        assert parsed.season_filter is None

    def test_plain_text_has_no_filters(self):
        parsed = parse_filters('paris')
        assert not parsed.has_filters

    def test_normalize_query(self):
        assert normalize_query('  Paris ') == 'paris'
