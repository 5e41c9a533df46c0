import csv
from pathlib import Path

import pytest

from election_results.errors import NameExtractionError
from election_results.resolve import extract_name
from election_results.translate import read_translation_table

FIXTURES = Path(__file__).parent / "fixtures"

CONST_LINE = ',,"০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য",,,,,,,,,,,,,,,,,,,'
CONST_LINE_WRONG = ',,"০০৩ ঠাকুরগাঁও-১ সংসদ সদস্য",,,,,,,,,,,,,,,,,,,'
CONST_LINE_EXTRA_SPACE = ',,,"০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য",,,,,,,,,,,,,,,,,,,'


def read_single_csv_row(line):
    return next(csv.reader([line]))


@pytest.fixture
def translations():
    return read_translation_table(FIXTURES / "cons_name_translate.csv")


def test_find_constituency_names(translations):
    row = read_single_csv_row(CONST_LINE)
    assert extract_name(row, translations) == "3 Thakurgaon-1"


def test_find_constituency_names_with_spacing_issue(translations):
    row = read_single_csv_row(CONST_LINE_EXTRA_SPACE)
    assert extract_name(row, translations) == "3 Thakurgaon-1"


def test_find_constituency_names_on_fail(translations):
    row = read_single_csv_row(CONST_LINE_WRONG)
    with pytest.raises(NameExtractionError) as excinfo:
        extract_name(row, translations)
    assert excinfo.value.name is None


def test_untranslated_name_is_returned_as_is():
    row = read_single_csv_row(CONST_LINE)
    assert extract_name(row) == "০০৩ ঠাকুরগাঁও-১"


def test_unknown_name_fails_lookup(translations):
    row = read_single_csv_row(',,"০৯৯ পঞ্চগড়-১ : সংসদ সদস্য",,,')
    with pytest.raises(NameExtractionError) as excinfo:
        extract_name(row, translations)
    assert excinfo.value.name == "০৯৯ পঞ্চগড়-১"


def test_first_cell_with_a_colon_wins():
    row = ["", "note without colon", " ০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য", "x: y"]
    assert extract_name(row) == "০০৩ ঠাকুরগাঁও-১"


def test_empty_row_fails():
    with pytest.raises(NameExtractionError):
        extract_name(["", "", ""])


def test_name_comes_from_the_label_cell_not_an_earlier_colon():
    row = ["কেন্দ্র: ১", "", "০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য"]
    assert extract_name(row) == "০০৩ ঠাকুরগাঁও-১"


def test_label_cell_is_translated_despite_earlier_colon(translations):
    row = ["সময়: ১০টা", "০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য", "মন্তব্য: নেই"]
    assert extract_name(row, translations) == "3 Thakurgaon-1"
