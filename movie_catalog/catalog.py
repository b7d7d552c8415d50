"""
Catalog store.
The immutable, in-memory sequence of movies that every query runs against.
"""

from typing import Iterable, Iterator, Optional, Tuple  # type annotations

from loguru import logger  # console logging

from .models import Movie  # movie data class
from .data_loader import DataLoader  # CSV ingestion


class CatalogStore:
	"""
	Read-only snapshot of the catalog, built once at startup.
	Records are frozen dataclasses held in a tuple, so queries can share it freely.
	"""

	def __init__(self, movies: Iterable[Movie] = ()):
		self._movies: Tuple[Movie, ...] = tuple(movies)  # order preserved from the source

	@classmethod
	def from_csv(cls, filepath, loader: Optional[DataLoader] = None) -> 'CatalogStore':
		"""Load the dataset file; an unreadable source gives an empty catalog."""
		loader = loader or DataLoader()
		store = cls(loader.load_movies_from_csv(filepath))
		logger.info(f"[Catalog] Catalog ready with {len(store)} movies")
		return store

	@classmethod
	def from_text(cls, text: str, loader: Optional[DataLoader] = None) -> 'CatalogStore':
		"""Build a catalog from CSV text already in memory."""
		loader = loader or DataLoader()
		return cls(loader.parse_csv_text(text))

	@property
	def movies(self) -> Tuple[Movie, ...]:
		return self._movies

	def __len__(self) -> int:
		return len(self._movies)

	def __iter__(self) -> Iterator[Movie]:
		return iter(self._movies)

	def __bool__(self) -> bool:
		return bool(self._movies)
