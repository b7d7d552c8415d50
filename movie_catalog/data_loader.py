"""
Data loading and preprocessing module.
Handles loading movies from the CSV export and normalizing every cell into a typed Movie.
"""

# Standard libs for CSV parsing, in-memory buffers, typing, and paths
import csv  # delimited text reader
import io  # wrap cleaned text as a file object
from typing import Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class and the per-field normalizers
from .models import Movie  # structured movie record
from .normalizers import (
	clean_text,
	parse_float,
	parse_int,
	parse_optional_int,
	parse_scaled_count,
)
from .config import COLUMN_MAP  # header name -> Movie field

# Console logging
from loguru import logger  # console logger

# Long descriptions must not trip the csv module's 128 KB default field limit
csv.field_size_limit(2**31 - 1)


class DataLoader:
	"""
	Handles loading and preprocessing of movie data.
	"""

	# Trailing clutter removed from every physical line before CSV parsing
	LINE_TERMINATORS = ';\r\n'

	def __init__(self, column_map: Optional[Dict[str, str]] = None):
		"""Initialize the loader with the header -> field mapping."""
		self.column_map = column_map or COLUMN_MAP  # store mapping for reuse

	def load_movies_from_csv(self, filepath) -> List[Movie]:
		"""
		Load movies from a CSV file.
		Never raises: a missing or unreadable file is logged and gives an empty list,
		so the service can still start.
		"""
		filepath = Path(filepath)  # normalize path
		logger.info(f"[Loader] Loading movies from {filepath}...")  # log action

		try:
			# utf-8-sig drops a BOM if the export has one
			text = filepath.read_text(encoding='utf-8-sig')
			movies = self.parse_csv_text(text)
		except (OSError, UnicodeDecodeError) as e:
			logger.error(f"[Loader] Error reading CSV {filepath}: {e}")  # data-source failure
			return []  # empty but valid catalog

		logger.info(f"[Loader] Successfully loaded {len(movies)} movies.")  # summary
		return movies  # return list

	def parse_csv_text(self, text: str) -> List[Movie]:
		"""
		Parse the full text of the dataset into Movie objects, in file order.
		Malformed rows are kept: missing cells become defaults, extra cells are ignored.
		"""
		cleaned = self._clean_lines(text)  # strip stray ';' terminators
		reader = csv.reader(io.StringIO(cleaned), delimiter=',', quotechar='"', skipinitialspace=True)

		header: Optional[List[str]] = None  # first non-blank row
		movies: List[Movie] = []  # accumulator
		for row_num, row in enumerate(self._read_rows(reader), 1):
			cells = [cell.strip() for cell in row]  # trim each field
			if not any(cells):  # entirely blank row
				continue
			if header is None:
				header = cells
				unknown = [h for h in header if h not in self.column_map]
				if unknown:
					logger.debug(f"[Loader] Ignoring unknown columns: {unknown}")
				continue
			if len(cells) != len(header):
				logger.debug(f"[Loader] Row {row_num} has {len(cells)} fields, expected {len(header)}")
			movies.append(self._parse_movie_row(self._row_to_dict(header, cells)))

		if header is None:
			logger.warning("[Loader] Dataset has no header row")
		return movies

	def _read_rows(self, reader):
		"""
		Yield rows from the csv reader, skipping a row the reader rejects
		instead of losing the rows around it.
		"""
		while True:
			try:
				row = next(reader)
			except StopIteration:
				return
			except csv.Error as e:
				logger.warning(f"[Loader] Skipping unreadable row near line {reader.line_num}: {e}")
				continue
			yield row

	def _clean_lines(self, text: str) -> str:
		"""
		Drop empty lines and trailing separator clutter, then rejoin with '\\n'.
		"""
		lines = [line.rstrip(self.LINE_TERMINATORS) for line in text.split('\n') if line]
		return '\n'.join(lines)

	def _row_to_dict(self, header: List[str], cells: List[str]) -> Dict[str, Optional[str]]:
		"""
		Pair cells with known header names; missing cells map to None.
		"""
		data: Dict[str, Optional[str]] = {field: None for field in self.column_map.values()}
		for column, value in zip(header, cells):
			field = self.column_map.get(column)
			if field is not None and data[field] is None:  # first column of a name wins
				data[field] = value
		return data

	def _parse_movie_row(self, data: Dict[str, Optional[str]]) -> Movie:
		"""
		Convert a raw row (field -> text) into a strongly-typed Movie object.
		"""
		return Movie(
			rank=parse_int(data.get('rank')),  # "1." -> 1
			year=parse_int(data.get('year')),  # "(2008)" -> 2008
			rating=parse_float(data.get('rating')),  # "9.3" -> 9.3
			number_of_ratings=parse_scaled_count(data.get('number_of_ratings')),  # "(2.9M)" -> 2900000
			duration_text=clean_text(data.get('duration_text')),
			age_limit=clean_text(data.get('age_limit')),
			metascore=parse_optional_int(data.get('metascore')),  # blank -> unrated
			description=clean_text(data.get('description')),
			name=clean_text(data.get('name')),
		)
