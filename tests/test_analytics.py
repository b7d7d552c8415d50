"""
Tests for CatalogAnalytics aggregates.
Run: python -m pytest tests/test_analytics.py
"""

import pytest

from movie_catalog.analytics import CatalogAnalytics
from movie_catalog.catalog import CatalogStore
from movie_catalog.models import Movie


def movie(rank, name, year=2000, rating=8.0, ratings=0):
	return Movie(rank=rank, year=year, rating=rating, number_of_ratings=ratings, name=name)


CATALOG = CatalogStore([
	movie(1, "Shawshank", year=1994, rating=9.3, ratings=2_900_000),
	movie(2, "Godfather", year=1972, rating=9.2, ratings=2_000_000),
	movie(3, "Dark Knight", year=2008, rating=9.0, ratings=2_900_000),
	movie(4, "Fight Club", year=1999, rating=8.8, ratings=2_400_000),
	movie(5, "Gladiator", year=2000, rating=8.5, ratings=1_600_000),
	movie(6, "Se7en", year=1995, rating=8.6, ratings=1_800_000),
])


def test_statistics():
	stats = CatalogAnalytics(CATALOG).statistics()
	assert stats.total_movies == 6
	assert stats.average_rating == pytest.approx((9.3 + 9.2 + 9.0 + 8.8 + 8.5 + 8.6) / 6)
	assert (stats.min_year, stats.max_year) == (1972, 2008)
	assert stats.most_popular == "Shawshank"  # tie with Dark Knight, first wins
	assert stats.highest_rated == "Shawshank"
	assert stats.rating_distribution == {8: 3, 9: 3}


def test_statistics_on_empty_catalog():
	stats = CatalogAnalytics(CatalogStore()).statistics()
	assert stats.total_movies == 0
	assert stats.average_rating == 0.0
	assert stats.min_year is None and stats.max_year is None
	assert stats.most_popular is None and stats.highest_rated is None
	assert stats.rating_distribution == {}


def test_by_decade():
	decades = CatalogAnalytics(CATALOG).by_decade()
	assert [d.decade for d in decades] == ["1970s", "1990s", "2000s"]

	nineties = decades[1]
	assert nineties.count == 3  # 1994, 1995 and 1999
	assert nineties.average_rating == pytest.approx((9.3 + 8.8 + 8.6) / 3)
	assert nineties.top_movie == "Shawshank"

	two_thousands = decades[2]
	assert two_thousands.count == 2
	assert two_thousands.top_movie == "Dark Knight"


def test_by_decade_orders_numerically():
	catalog = CatalogStore([movie(1, "Future", year=2010), movie(2, "Silent", year=905), movie(3, "Talkie", year=1930)])
	assert [d.decade for d in CatalogAnalytics(catalog).by_decade()] == ["900s", "1930s", "2010s"]


def test_rating_vs_popularity():
	catalog = CatalogStore([
		movie(1, "Niche", rating=9.5, ratings=30_000),
		movie(2, "Huge", rating=8.0, ratings=6_000_000),
		movie(3, "Mid", rating=8.5, ratings=1_500_000),
	])
	scores = CatalogAnalytics(catalog).rating_vs_popularity()
	assert [s.name for s in scores] == ["Huge", "Mid", "Niche"]

	huge = scores[0]
	assert huge.popularity == 6_000_000
	assert huge.popularity_score == 10.0  # capped
	assert huge.balanced_score == pytest.approx(8.0 * 0.7 + 10.0 * 0.3)

	niche = scores[2]
	assert niche.popularity_score == pytest.approx(0.1)
	assert niche.balanced_score == pytest.approx(9.5 * 0.7 + 0.1 * 0.3)


def test_empty_catalog_lists():
	analytics = CatalogAnalytics(CatalogStore())
	assert analytics.by_decade() == []
	assert analytics.rating_vs_popularity() == []


def test_aggregates_over_rows_with_huge_numbers():
	text = (
		"Rank,Year,Duration,AgeLimit,Rating,NumberOfRatings,Metascore,Description,Name\n"
		"1,1994,2h,R,9.0,(12345678901234567890),80,d,Big\n"
		"2,99999999999999999999999,2h,R,8.0,(1M),70,d,Odd year\n"
		"3,1999,2h,R,8.5,(2M),75,d,Normal\n"
	)
	analytics = CatalogAnalytics(CatalogStore.from_text(text))

	stats = analytics.statistics()
	assert stats.total_movies == 3
	assert stats.most_popular == "Normal"
	assert (stats.min_year, stats.max_year) == (0, 1999)

	assert [d.decade for d in analytics.by_decade()] == ["0s", "1990s"]
	assert [s.name for s in analytics.rating_vs_popularity()] == ["Normal", "Odd year", "Big"]
