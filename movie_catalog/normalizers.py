"""
Field normalizers.
Turn raw CSV cells into typed values. Every function here is total: bad input
falls back to a default instead of raising, so a single messy cell never drops a row.
"""

import math  # reject inf from oversized float literals
import re  # character filtering and the scaled-count pattern
from decimal import Decimal  # exact "2.9" * 1_000_000
from typing import Optional  # absent values

# Characters that survive cleaning for each numeric kind
_NON_INT_CHARS = re.compile(r"[^0-9-]")
_NON_FLOAT_CHARS = re.compile(r"[^0-9.-]")
_NON_DIGITS = re.compile(r"[^0-9]")

# A whole cleaned string must look like an integer or a plain decimal
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

# Human-scaled counts such as "2.9M", "500", "1.2k"
_SCALED_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)([KMB]?)", re.IGNORECASE)
_SCALE_MULTIPLIERS = {
	'': 1,
	'K': 1_000,
	'M': 1_000_000,
	'B': 1_000_000_000,
}

# Values outside a signed 32-bit integer count as unparseable
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def try_parse_int(text: str) -> Optional[int]:
	"""Parse an optionally signed run of digits in 32-bit range, or return None."""
	text = text.strip()
	if not _INT_RE.fullmatch(text):
		return None
	if len(text.lstrip('+-').lstrip('0')) > 10:  # also keeps int() clear of its digit limit
		return None
	value = int(text)
	return value if INT_MIN <= value <= INT_MAX else None


def parse_int(text: Optional[str]) -> int:
	"""Integer with every non-digit (other than '-') dropped; 0 when unusable."""
	if not text or not text.strip():
		return 0
	value = try_parse_int(_NON_INT_CHARS.sub('', text))
	return value if value is not None else 0


def parse_optional_int(text: Optional[str]) -> Optional[int]:
	"""
	Like parse_int, but blank or unparseable input gives None instead of 0.
	Used where zero and "unknown" mean different things (e.g. metascore).
	"""
	if not text or not text.strip():
		return None
	return try_parse_int(_NON_INT_CHARS.sub('', text))


def parse_float(text: Optional[str]) -> float:
	"""Float using '.' as decimal point regardless of locale; 0.0 when unusable."""
	if not text or not text.strip():
		return 0.0
	cleaned = _NON_FLOAT_CHARS.sub('', text)
	if not _FLOAT_RE.fullmatch(cleaned):
		return 0.0
	value = float(cleaned)  # huge literals give inf rather than raising
	return value if math.isfinite(value) else 0.0


def parse_scaled_count(text: Optional[str]) -> int:
	"""
	Expand notation like "(2.9M)", "1.2K" or "500" into an integer count.
	Surrounding parentheses and spaces are ignored. When the value does not
	match the number+suffix pattern, all digits of the original text are used
	as a plain integer. No digits, or a count beyond the 32-bit range, gives 0.
	"""
	if not text or not text.strip():
		return 0

	trimmed = text.strip('() ')  # "(2.9M)" -> "2.9M"
	match = _SCALED_RE.fullmatch(trimmed)
	if match:
		number = Decimal(match.group(1))  # regex guarantees a valid literal
		multiplier = _SCALE_MULTIPLIERS[match.group(2).upper()]
		value = number * multiplier
		return int(value) if value <= INT_MAX else 0  # int() truncates toward zero

	# Fallback: keep only the digits ("1,234 votes" -> 1234)
	value = try_parse_int(_NON_DIGITS.sub('', text))
	return value if value is not None else 0


def clean_text(text: Optional[str]) -> Optional[str]:
	"""Trim a free-text cell; blank becomes None."""
	if text is None:
		return None
	text = text.strip()
	return text or None
