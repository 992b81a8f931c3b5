"""Page geometry and typography shared by the PDF and DOCX renderers.

Both targets print on US Letter with fixed one-inch margins and the
Helvetica family, so a contract paginates the same either way.
"""

from __future__ import annotations

PAGE_WIDTH_IN = 8.5
PAGE_HEIGHT_IN = 11.0
MARGIN_IN = 1.0

POINTS_PER_INCH = 72
PAGE_WIDTH_PT = PAGE_WIDTH_IN * POINTS_PER_INCH
PAGE_HEIGHT_PT = PAGE_HEIGHT_IN * POINTS_PER_INCH
MARGIN_PT = MARGIN_IN * POINTS_PER_INCH
CONTENT_WIDTH_PT = PAGE_WIDTH_PT - 2 * MARGIN_PT

FONT_FAMILY = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

BODY_SIZE = 10
HEADER_SIZE = 18
SUBTITLE_SIZE = 12
CLAUSE_SIZE = 11
LINE_GAP_PT = 12  # one Spacer line

BRAND_HEX = "#119600"
BRAND_RGB = (0x11, 0x96, 0x00)
HIGHLIGHT_HEX = "#E8F5E3"

SIGNATURE_LINE = "_" * 32
