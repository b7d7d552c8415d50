"""
Duration parsing.
Converts free-text running times such as "2h 22m", "45m" or "2h" into minutes.
"""

from typing import Optional

from .normalizers import try_parse_int  # same integer rules as the CSV cells


def _to_int(text: str) -> int:
	value = try_parse_int(text)
	return value if value is not None else 0


def parse_duration_minutes(duration: Optional[str]) -> int:
	"""
	Return the total number of minutes described by `duration`.

	Hours are read from the text before the first 'h', minutes from the text
	after the last 'h' with every 'm' removed. Missing or unreadable parts
	count as zero, so "bad", "" and None all give 0.
	"""
	if not duration or not duration.strip():
		return 0

	hours = 0
	minutes = 0

	if 'h' in duration:
		hours = _to_int(duration.split('h')[0])

	if 'm' in duration:
		minutes_part = duration.split('h')[-1].replace('m', '')
		minutes = _to_int(minutes_part)

	return max(0, hours * 60 + minutes)
