"""Tests for entry relevance scoring."""

import pytest

from travel_log.domain.models import Entry
from travel_log.search.scorer import score_entry


@pytest.fixture
def paris():
    return Entry(id='1', location='Paris', details='Amazing summer trip to Paris')


def test_full_location_match(paris):
    # 100 location + 25 details + 30 + 15 approximate
    assert score_entry(paris, 'paris') == 170


def test_partial_location_match(paris):
    # 50 location + 25 details + 30 + 15 approximate
    assert score_entry(paris, 'par') == 120


def test_approximate_only(paris):
    assert score_entry(paris, 'prs') == 45


def test_details_only(paris):
    # "summer" is in the details and too long for the location
    assert score_entry(paris, 'summer') == 40


def test_no_relevance(paris):
    assert score_entry(paris, 'tokyo') == 0


def test_location_compared_lowercased():
    entry = Entry(id='2', location='NEW YORK', details='')
    assert score_entry(entry, 'new york') == 130
