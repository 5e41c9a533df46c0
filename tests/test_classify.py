import csv

import pytest

from election_results.classify import (
    RowKind,
    classify,
    is_center_information_row,
    is_constituency_row,
)
from election_results.errors import RowTypeAmbiguous, TallyError
from election_results.rules import CONSTITUENCY_PATTERN


def read_single_csv_row(line):
    return next(csv.reader([line]))


def test_pattern_matches_label_text():
    assert CONSTITUENCY_PATTERN.search("০০১ This is : সংসদ সদস্য)")


def test_constituency_row_after_leading_empties():
    row = read_single_csv_row(',,,"০০১ পঞ্চগড়-১ : সংসদ সদস্য",,,,,,,,,,,,,,,,,,')
    assert is_constituency_row(row)
    assert classify(row) is RowKind.CONSTITUENCY_LABEL


@pytest.mark.parametrize(
    "line",
    [
        ',,"০০৩ ঠাকুরগাঁও-১ সংসদ সদস্য",,,',
        ',,"ঠাকুরগাঁও-১ : সংসদ সদস্য",,,',
        ',,"003 Thakurgaon-1 : সংসদ সদস্য",,,',
    ],
)
def test_marker_phrase_without_label_shape_is_not_a_label(line):
    row = read_single_csv_row(line)
    assert not is_constituency_row(row)
    assert classify(row) is RowKind.DATA_ROW


def test_center_row():
    row = read_single_csv_row(
        '"কেন্দ্র","মোট ভোটার","আল রাশেদ প্রধান ","মোঃ আব্দুল্লাহ ","মোট বৈধ","মোট বাতিল","প্রদত্ত ভোট","শতকরা হার",,,'
    )
    assert is_center_information_row(row)
    assert classify(row) is RowKind.CENTER_INFO_HEADER


def test_center_marker_only_counts_in_first_cell():
    row = ["", "কেন্দ্র", "মোট ভোটার"]
    assert classify(row) is RowKind.DATA_ROW
    assert not is_center_information_row(row)


@pytest.mark.parametrize("row", [[], [""], ["", "  ", "\t", ""]])
def test_blank_rows_are_empty(row):
    assert classify(row) is RowKind.EMPTY


def test_label_takes_precedence_over_center_header():
    row = ["কেন্দ্র", "০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য"]
    assert classify(row) is RowKind.CONSTITUENCY_LABEL


def test_anything_else_is_a_data_row():
    row = read_single_csv_row('"1 আর কে স্টেট উচ্চ বিদ্যালয়",2885,1097,805,26,3,1931,114,2045,70.88%,,,')
    assert classify(row) is RowKind.DATA_ROW


def test_unrecognised_rows_degrade_instead_of_raising():
    row = ["???", "", "—"]
    assert classify(row) is RowKind.DATA_ROW
    assert issubclass(RowTypeAmbiguous, TallyError)
    assert str(RowTypeAmbiguous(row)) == "Can't detect the type of row automatically"
