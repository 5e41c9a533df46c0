"""
Deterministic layout rules for the stacked result sheets.

Everything the row classifier and the aggregator treat as fixed lives here.
"""

import re

# "০০৩ ঠাকুরগাঁও-১ : সংসদ সদস্য" (constituency code, name, "Member of Parliament")
CONSTITUENCY_PATTERN = re.compile(r"[০১২৩৪৫৬৭৮৯]{3}.[^:]*: সংসদ সদস্য")

# first cell of the header row that precedes a section's symbol list
CENTER_MARKER = "কেন্দ্র"

# data rows: center name, total voters, then one cell per symbol
DATA_OFFSET = 2

CONSTITUENCY_COLUMN = "Constituency"
CENTER_COLUMN = "Center"
TOTAL_VOTERS_COLUMN = "total_voters"

# total valid, total rejected, votes cast, turnout percentage
SUMMARY_COLUMNS = ("মোট বৈধ", "মোট বাতিল", "প্রদত্ত ভোট", "শতকরা হার")

MISSING_VALUE = "0"

TARGET_ENCODING = "utf-8-sig"  # UTF-8 with BOM
NORMALIZED_DELIMITER = ","
