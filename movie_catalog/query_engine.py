"""
Query engine module.
Filter, search and ordering operations over the catalog snapshot.
"""

from typing import Callable, List, Optional  # type annotations for clarity

# Import project modules for data structures and helpers
from .models import Movie  # core data class
from .catalog import CatalogStore  # immutable movie collection
from .duration import parse_duration_minutes  # "2h 22m" -> 142

# Import loguru for console logging
from loguru import logger  # simple structured logger


class MovieQueryEngine:
	"""
	Read-only query API over a CatalogStore.
	Every method returns a new list; ties keep catalog order because sorted() is stable.
	"""

	# Certificates considered suitable for all ages
	FAMILY_AGE_LIMITS = ('U', 'PG', 'G')
	QUICK_WATCH_LIMIT = 20  # max results for quick_watch

	def __init__(self, catalog: CatalogStore):
		self.catalog = catalog  # shared snapshot, never modified here

	def _where(self, predicate: Callable[[Movie], bool]) -> List[Movie]:
		return [m for m in self.catalog if predicate(m)]

	def all(self) -> List[Movie]:
		"""Every movie in catalog order."""
		return list(self.catalog)

	def by_rank(self, rank: int) -> Optional[Movie]:
		"""First movie with this rank, or None. Duplicate ranks resolve to the earliest row."""
		for movie in self.catalog:
			if movie.rank == rank:
				return movie
		return None

	def by_year(self, year: int) -> List[Movie]:
		return self._where(lambda m: m.year == year)

	def top_rated(self, count: int = 10) -> List[Movie]:
		"""Highest rating first, at most `count` movies."""
		ordered = sorted(self.catalog, key=lambda m: m.rating, reverse=True)
		return ordered[:max(0, count)]

	def by_rating_range(self, min_rating: float = 0.0, max_rating: float = 10.0) -> List[Movie]:
		"""Movies with min_rating <= rating <= max_rating, best first."""
		matches = self._where(lambda m: min_rating <= m.rating <= max_rating)
		return sorted(matches, key=lambda m: m.rating, reverse=True)

	def by_year_range(self, start_year: int, end_year: int) -> List[Movie]:
		"""Movies released between the two years (inclusive), oldest first."""
		matches = self._where(lambda m: start_year <= m.year <= end_year)
		return sorted(matches, key=lambda m: m.year)

	def by_max_duration(self, max_minutes: int = 180) -> List[Movie]:
		"""Movies no longer than max_minutes, shortest first. Unknown durations count as 0."""
		matches = self._where(lambda m: parse_duration_minutes(m.duration_text) <= max_minutes)
		return sorted(matches, key=lambda m: parse_duration_minutes(m.duration_text))

	def by_age_rating(self, age_limit: str) -> List[Movie]:
		"""Movies whose certificate equals age_limit, ignoring case."""
		target = (age_limit or '').lower()
		return self._where(lambda m: m.age_limit is not None and m.age_limit.lower() == target)

	def search(self, query: str) -> List[Movie]:
		"""
		Case-insensitive substring search over name and description, best rated first.
		Raises ValueError for an empty or whitespace-only query.
		"""
		if not query or not query.strip():  # empty input guard
			raise ValueError("Search query is required")

		needle = query.lower()
		logger.debug(f"[Engine] Searching for '{query}'")  # trace

		def _matches(movie: Movie) -> bool:
			return (
				(movie.name is not None and needle in movie.name.lower()) or
				(movie.description is not None and needle in movie.description.lower())
			)

		results = sorted(self._where(_matches), key=lambda m: m.rating, reverse=True)
		logger.debug(f"[Engine] Search '{query}' matched {len(results)} movies")
		return results

	def most_popular(self, count: int = 10) -> List[Movie]:
		"""Movies with the most ratings first."""
		ordered = sorted(self.catalog, key=lambda m: m.number_of_ratings, reverse=True)
		return ordered[:max(0, count)]

	def critically_acclaimed(self, min_metascore: int = 80) -> List[Movie]:
		"""Rated movies with metascore >= min_metascore, highest metascore first."""
		matches = self._where(lambda m: m.metascore is not None and m.metascore >= min_metascore)
		return sorted(matches, key=lambda m: m.metascore, reverse=True)

	def family_friendly(self) -> List[Movie]:
		matches = self._where(lambda m: m.age_limit in self.FAMILY_AGE_LIMITS)
		return sorted(matches, key=lambda m: m.rating, reverse=True)

	def quick_watch(self, max_minutes: int = 120) -> List[Movie]:
		"""Best rated movies that fit in max_minutes (top 20)."""
		matches = self._where(lambda m: parse_duration_minutes(m.duration_text) <= max_minutes)
		ordered = sorted(matches, key=lambda m: m.rating, reverse=True)
		return ordered[:self.QUICK_WATCH_LIMIT]
