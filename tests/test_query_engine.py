"""
Tests for MovieQueryEngine filters, ordering and search.
Run: python -m pytest tests/test_query_engine.py
"""

import pytest

from movie_catalog.catalog import CatalogStore
from movie_catalog.models import Movie
from movie_catalog.query_engine import MovieQueryEngine


def movie(rank, name=None, year=2000, rating=7.0, ratings=0, duration=None, age=None, metascore=None, description=None):
	return Movie(
		rank=rank,
		year=year,
		rating=rating,
		number_of_ratings=ratings,
		duration_text=duration,
		age_limit=age,
		metascore=metascore,
		description=description,
		name=name,
	)


def engine_for(*movies):
	return MovieQueryEngine(CatalogStore(movies))


def names(movies):
	return [m.name for m in movies]


def test_all_keeps_catalog_order():
	engine = engine_for(movie(3, "C"), movie(1, "A"), movie(2, "B"))
	assert names(engine.all()) == ["C", "A", "B"]


def test_by_rank_first_match_wins():
	engine = engine_for(movie(1, "First"), movie(2, "Other"), movie(1, "Duplicate"))
	assert engine.by_rank(1).name == "First"
	assert engine.by_rank(2).name == "Other"
	assert engine.by_rank(99) is None


def test_by_year():
	engine = engine_for(movie(1, "A", year=1994), movie(2, "B", year=1995), movie(3, "C", year=1994))
	assert names(engine.by_year(1994)) == ["A", "C"]
	assert engine.by_year(1800) == []


def test_top_rated_orders_by_rating():
	engine = engine_for(movie(1, "A", rating=9.0), movie(2, "B", rating=9.5), movie(3, "C", rating=8.0))
	assert names(engine.top_rated(3)) == ["B", "A", "C"]
	assert names(engine.top_rated(1)) == ["B"]
	assert len(engine.top_rated()) == 3
	assert engine.top_rated(-1) == []


def test_top_rated_ties_keep_catalog_order():
	engine = engine_for(movie(1, "A", rating=9.0), movie(2, "B", rating=9.0), movie(3, "C", rating=9.0))
	assert names(engine.top_rated(3)) == ["A", "B", "C"]


def test_rating_range_is_inclusive():
	engine = engine_for(
		movie(1, "Low", rating=6.9),
		movie(2, "Min", rating=7.0),
		movie(3, "Max", rating=8.0),
		movie(4, "High", rating=8.1),
	)
	assert names(engine.by_rating_range(7.0, 8.0)) == ["Max", "Min"]
	assert len(engine.by_rating_range()) == 4


def test_year_range_bounds_and_order():
	engine = engine_for(
		movie(1, "2011", year=2011),
		movie(2, "2010", year=2010),
		movie(3, "1999", year=1999),
		movie(4, "2005", year=2005),
		movie(5, "2000", year=2000),
	)
	assert names(engine.by_year_range(2000, 2010)) == ["2000", "2005", "2010"]


def test_max_duration_orders_shortest_first():
	engine = engine_for(
		movie(1, "Long", duration="3h 10m"),
		movie(2, "Medium", duration="2h"),
		movie(3, "Short", duration="45m"),
		movie(4, "Unknown"),
	)
	assert names(engine.by_max_duration(120)) == ["Unknown", "Short", "Medium"]
	assert len(engine.by_max_duration()) == 4


def test_age_rating_ignores_case():
	engine = engine_for(movie(1, "Lower", age="pg"), movie(2, "Upper", age="PG"), movie(3, "R", age="R"), movie(4, "None"))
	assert names(engine.by_age_rating("PG")) == ["Lower", "Upper"]
	assert names(engine.by_age_rating("r")) == ["R"]


def test_search_matches_name_or_description():
	engine = engine_for(
		movie(1, "The Dark Knight", rating=9.0, description="Gotham in chaos"),
		movie(2, "Batman Begins", rating=8.2),
		movie(3, "Heat", rating=8.3, description="A DARK heist"),
		movie(4, "Up", rating=8.3),
	)
	assert names(engine.search("dark")) == ["The Dark Knight", "Heat"]
	assert names(engine.search("GOTHAM")) == ["The Dark Knight"]
	assert engine.search("nothing like this") == []


@pytest.mark.parametrize("query", ["", "   ", "\t", None])
def test_search_rejects_blank_query(query):
	engine = engine_for(movie(1, "A"))
	with pytest.raises(ValueError):
		engine.search(query)


def test_most_popular():
	engine = engine_for(movie(1, "A", ratings=10), movie(2, "B", ratings=3_000), movie(3, "C", ratings=200))
	assert names(engine.most_popular(2)) == ["B", "C"]


def test_critically_acclaimed_skips_unrated():
	engine = engine_for(
		movie(1, "Unrated"),
		movie(2, "Eighty", metascore=80),
		movie(3, "Hundred", metascore=100),
		movie(4, "Zero", metascore=0),
		movie(5, "Seventy", metascore=79),
	)
	assert names(engine.critically_acclaimed()) == ["Hundred", "Eighty"]
	assert names(engine.critically_acclaimed(0)) == ["Hundred", "Eighty", "Seventy", "Zero"]


def test_family_friendly():
	engine = engine_for(
		movie(1, "U", age="U", rating=7.0),
		movie(2, "PG", age="PG", rating=8.0),
		movie(3, "G", age="G", rating=7.5),
		movie(4, "PG-13", age="PG-13", rating=9.0),
		movie(5, "None", rating=9.5),
	)
	assert names(engine.family_friendly()) == ["PG", "G", "U"]


def test_quick_watch_limits_to_twenty():
	movies = [movie(i, f"M{i}", rating=i / 10, duration="1h 30m") for i in range(1, 31)]
	movies.append(movie(99, "Epic", rating=9.9, duration="3h"))
	engine = MovieQueryEngine(CatalogStore(movies))
	quick = engine.quick_watch()
	assert len(quick) == 20
	assert quick[0].name == "M30"
	assert "Epic" not in names(quick)
	assert names(engine.quick_watch(180))[0] == "Epic"


def test_queries_do_not_modify_catalog():
	catalog = CatalogStore([movie(2, "B", rating=1.0), movie(1, "A", rating=9.0)])
	engine = MovieQueryEngine(catalog)
	engine.top_rated()
	engine.by_year_range(1900, 2100)
	assert names(catalog.movies) == ["B", "A"]


def test_case_insensitive_matching_does_not_fold_sharp_s():
	engine = engine_for(movie(1, "Die Straße", rating=8.0), movie(2, "Strasse", rating=7.0, age="PG"))
	assert names(engine.search("STRASSE")) == ["Strasse"]
	assert names(engine.search("straße")) == ["Die Straße"]
	assert names(engine.by_age_rating("pg")) == ["Strasse"]
