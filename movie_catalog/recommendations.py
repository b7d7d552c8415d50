"""
Recommendation module.
Rule-based recommendation lists built from rating, popularity, year and running time.
"""

from typing import List, Optional

from .models import Movie
from .catalog import CatalogStore
from .duration import parse_duration_minutes

from loguru import logger


class Recommender:
	"""
	Produces recommendation lists from fixed thresholds:
	- similar by year: released within `year_window` years of a given movie
	- hidden gems: high rating with comparatively few ratings
	- crowd pleasers: high rating and many ratings
	- time based: best movies that fit into the available time
	"""

	def __init__(
		self,
		catalog: CatalogStore,
		year_window: int = 5,
		min_rating: float = 8.5,
		hidden_gem_max_ratings: int = 1_000_000,
		crowd_pleaser_min_ratings: int = 1_500_000,
		time_based_limit: int = 10,
	):
		self.catalog = catalog
		self.year_window = year_window
		self.min_rating = min_rating
		self.hidden_gem_max_ratings = hidden_gem_max_ratings
		self.crowd_pleaser_min_ratings = crowd_pleaser_min_ratings
		self.time_based_limit = time_based_limit

	def _best_first(self, movies: List[Movie], count: int) -> List[Movie]:
		ordered = sorted(movies, key=lambda m: m.rating, reverse=True)
		return ordered[:max(0, count)]

	def similar_by_year(self, rank: int, count: int = 5) -> Optional[List[Movie]]:
		"""
		Best rated movies released within year_window years of the movie with `rank`.
		The movie itself is excluded. Returns None when no movie has that rank.
		"""
		target = next((m for m in self.catalog if m.rank == rank), None)
		if target is None:
			logger.debug(f"[Recommender] No movie with rank {rank}")
			return None

		similar = [
			m for m in self.catalog
			if m.rank != rank and abs(m.year - target.year) <= self.year_window
		]
		return self._best_first(similar, count)

	def hidden_gems(self, count: int = 10) -> List[Movie]:
		gems = [
			m for m in self.catalog
			if m.rating >= self.min_rating and m.number_of_ratings < self.hidden_gem_max_ratings
		]
		return self._best_first(gems, count)

	def crowd_pleasers(self, count: int = 10) -> List[Movie]:
		pleasers = [
			m for m in self.catalog
			if m.rating >= self.min_rating and m.number_of_ratings >= self.crowd_pleaser_min_ratings
		]
		return self._best_first(pleasers, count)

	def time_based(self, available_minutes: int = 120) -> List[Movie]:
		"""Top rated movies whose running time fits into available_minutes."""
		fitting = [m for m in self.catalog if parse_duration_minutes(m.duration_text) <= available_minutes]
		return self._best_first(fitting, self.time_based_limit)
