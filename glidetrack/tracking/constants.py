"""
GlideTrack Tracking Constants
Record layouts used when reading flight recorder files.
"""

import re
from datetime import date, timedelta

# IGC B record: fix time, position, validity, pressure and GNSS altitude
B_RECORD_PATTERN = re.compile(
    r"^B"
    r"(\d\d)(\d\d)(\d\d)"  # HHMMSS (UTC)
    r"(\d\d)(\d\d)(\d\d\d)([NS])"  # DDMMmmm latitude
    r"(\d\d\d)(\d\d)(\d\d\d)([EW])"  # DDDMMmmm longitude
    r"([AV])"  # fix validity
    r"([-\d]\d\d\d\d)([-\d]\d\d\d\d)"  # pressure / GNSS altitude (m)
)

# IGC H record carrying the flight date, old (HFDTEddmmyy) and new
# (HFDTEDATE:ddmmyy,nn) styles
DATE_RECORD_PATTERN = re.compile(r"^HFDTE(?:DATE:)?(\d\d)(\d\d)(\d\d)")

# Used when a file carries no date header
DEFAULT_FLIGHT_DATE = date(2000, 1, 1)

IGC_FILE_ENCODING = "latin-1"

# A fix this much earlier than the one before it means the clock wrapped
# past midnight. Smaller backsteps are logger glitches and are dropped
MIDNIGHT_ROLLOVER_GAP = timedelta(hours=12)
