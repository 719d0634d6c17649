"""
sales_core.config
Central configuration/constants.
"""
from __future__ import annotations

DEFAULT_INPUT_CSV = "sales.csv"

# column candidates, first present + non-empty value wins
CATEGORY_FIELDS = ("Sum of Total Paid/Refunded", "Genres")
AMOUNT_FIELDS = ("Payment Type", "card")
ID_FIELDS = ("Classes",)
DATE_FIELDS = ("Date",)
PAYMENT_DETAILS_FIELDS = ("Payment Details",)
CARD_TYPE_FIELDS = ("Card Type",)

UNCATEGORIZED = "Uncategorized"

# summary rows embedded in the export (case-sensitive)
SKIP_CATEGORY_MARKERS = ("Total", "Grand Total")

# report text
ORG_TITLE = "Rossmoor Walnut Creek Recreation Department"
REPORT_SUBTITLE = "Daily Sales Report"
TABLE_HEAD = ["Transaction ID", "Date", "Payment Details", "Card Type", "Amount"]

REPORT_FILE_PREFIX = "RWC-Sales-Report"
REPORT_FILE_FALLBACK = "report"

DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%y %I:%M %p",
    "%m/%d/%y %H:%M",
)

DATE_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y-%m-%d",
    "%m-%d-%Y",
    "%m-%d-%y",
)

# page geometry, millimetres on A4 portrait
PAGE_HEIGHT_MM = 297.0
PAGE_WIDTH_MM = 210.0
SIDE_MARGIN_MM = 14.0
PAGE_BREAK_MARGIN_MM = 47.0      # section break once cursor passes 250
SUMMARY_BREAK_MARGIN_MM = 27.0   # grand total break once cursor passes 270
TOP_MARGIN_MM = 20.0
FIRST_PAGE_TOP_MM = 40.0
BOTTOM_MARGIN_MM = 14.0
SECTION_HEADER_MM = 10.0
TABLE_GAP_MM = 5.0
SUBTOTAL_LINE_MM = 6.0
SUBTOTAL_GAP_MM = 6.0

# default row estimate when no backend measurer is supplied
EST_HEAD_ROW_MM = 8.0
EST_BODY_ROW_MM = 6.5

# colours (RGB 0-255)
SECTION_FILL = (67, 97, 238)
TABLE_HEAD_FILL = (100, 116, 139)
REFUND_TEXT = (220, 38, 38)
ZERO_TEXT = (107, 114, 128)

# backend blocks that must add up to the planner geometry above
TITLE_ROWS_MM = (9.0, 6.0, 5.0)  # title, subtitle, report date
SECTION_BAR_MM = 8.0
GRAND_TOTAL_BAR_MM = 10.0
