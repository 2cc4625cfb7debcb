"""Tests for approximate subsequence matching."""

import pytest

from travel_log.search.matcher import approximate_match


def test_exact_match_is_full_ratio():
    assert approximate_match('paris', 'paris') == 1.0


def test_unrelated_strings_score_zero():
    assert approximate_match('paris', 'tokyo') == 0


def test_query_inside_longer_text():
    assert approximate_match('paris france', 'paris') == 1.0


def test_scattered_subsequence():
    assert approximate_match('paris', 'prs') == 1.0
    assert approximate_match('london', 'prs') == 0


@pytest.mark.parametrize("text,query", [
    ('paris', ''),
    ('', 'paris'),
    ('', ''),
])
def test_empty_inputs(text, query):
    assert approximate_match(text, query) == 0


def test_query_longer_than_text():
    assert approximate_match('par', 'paris') == 0


def test_case_sensitive():
    assert approximate_match('Paris', 'paris') == 0


def test_incomplete_subsequence_gets_no_partial_credit():
    # Greedy pass consumes "p" and "a" only; "r" never follows
    assert approximate_match('prais', 'pars') == 0
