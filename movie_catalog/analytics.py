"""
Analytics module.
Aggregates computed over the whole catalog on every call: summary statistics,
per-decade breakdown, and a rating vs popularity score.
"""

from typing import Dict, List  # type annotations

import numpy as np  # vectorized means, argmax and histograms

from .models import CatalogStatistics, DecadeSummary, Movie, PopularityScore
from .catalog import CatalogStore

from loguru import logger


class CatalogAnalytics:
	"""
	Computes derived aggregates from a CatalogStore.
	An empty catalog yields a zeroed summary and empty lists instead of raising.

	popularity_score = min(max_popularity_score, number_of_ratings / ratings_per_point)
	balanced_score   = rating_weight * rating + popularity_weight * popularity_score
	"""

	def __init__(
		self,
		catalog: CatalogStore,
		rating_weight: float = 0.7,
		popularity_weight: float = 0.3,
		ratings_per_point: float = 300_000.0,
		max_popularity_score: float = 10.0,
	):
		self.catalog = catalog
		self.rating_weight = rating_weight
		self.popularity_weight = popularity_weight
		self.ratings_per_point = ratings_per_point
		self.max_popularity_score = max_popularity_score

	def statistics(self) -> CatalogStatistics:
		"""Count, mean rating, year span, most popular / highest rated names, rating histogram."""
		movies = self.catalog.movies
		if not movies:
			logger.warning("[Analytics] Statistics requested on an empty catalog")
			return CatalogStatistics(total_movies=0, average_rating=0.0)

		ratings = np.array([m.rating for m in movies], dtype=float)
		years = np.array([m.year for m in movies], dtype=int)
		popularity = np.array([m.number_of_ratings for m in movies], dtype=np.int64)

		# np.argmax returns the first index on ties, i.e. the earliest catalog entry
		most_popular = movies[int(np.argmax(popularity))]
		highest_rated = movies[int(np.argmax(ratings))]

		buckets, counts = np.unique(np.floor(ratings).astype(int), return_counts=True)
		distribution = {int(b): int(c) for b, c in zip(buckets, counts)}

		return CatalogStatistics(
			total_movies=len(movies),
			average_rating=float(ratings.mean()),
			min_year=int(years.min()),
			max_year=int(years.max()),
			most_popular=most_popular.name,
			highest_rated=highest_rated.name,
			rating_distribution=distribution,
		)

	def by_decade(self) -> List[DecadeSummary]:
		"""One summary per decade (floor(year / 10) * 10), oldest decade first."""
		groups: Dict[int, List[Movie]] = {}
		for movie in self.catalog:
			groups.setdefault((movie.year // 10) * 10, []).append(movie)

		summaries: List[DecadeSummary] = []
		for decade in sorted(groups):
			members = groups[decade]
			ratings = np.array([m.rating for m in members], dtype=float)
			summaries.append(DecadeSummary(
				decade=f"{decade}s",
				count=len(members),
				average_rating=float(ratings.mean()),
				top_movie=members[int(np.argmax(ratings))].name,
			))
		return summaries

	def popularity_score(self, number_of_ratings: int) -> float:
		"""Scale a rating count to 0..max_popularity_score."""
		return min(self.max_popularity_score, number_of_ratings / self.ratings_per_point)

	def rating_vs_popularity(self) -> List[PopularityScore]:
		"""Every movie with its popularity and balanced scores, best balance first."""
		scores: List[PopularityScore] = []
		for movie in self.catalog:
			pop_score = self.popularity_score(movie.number_of_ratings)
			scores.append(PopularityScore(
				name=movie.name,
				rating=movie.rating,
				popularity=movie.number_of_ratings,
				popularity_score=pop_score,
				balanced_score=self.rating_weight * movie.rating + self.popularity_weight * pop_score,
			))
		return sorted(scores, key=lambda s: s.balanced_score, reverse=True)
