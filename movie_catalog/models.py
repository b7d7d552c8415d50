"""
Data models for the Movie Catalog service.
Defines the typed movie record and the derived aggregates computed from the catalog.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Dict, Optional  # optional values and mappings


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single row of the catalog after normalization.
	Numeric fields are always typed; text fields are trimmed or None.
	Frozen so the catalog can be shared between requests without copying.
	"""
	rank: int  # position in the source list, used as identifier
	year: int  # release year (0 when the source value was unusable)
	rating: float  # average user rating, expected 0-10 but not enforced
	number_of_ratings: int  # expanded from notation like "(2.9M)"
	duration_text: Optional[str] = None  # raw duration such as "2h 22m"
	age_limit: Optional[str] = None  # certificate such as "PG-13"
	metascore: Optional[int] = None  # critic score, None means unrated
	description: Optional[str] = None  # short synopsis
	name: Optional[str] = None  # display title


@dataclass
class CatalogStatistics:
	"""Summary of the whole catalog."""
	total_movies: int
	average_rating: float
	min_year: Optional[int] = None
	max_year: Optional[int] = None
	most_popular: Optional[str] = None  # name of the movie with the most ratings
	highest_rated: Optional[str] = None  # name of the movie with the best rating
	rating_distribution: Dict[int, int] = field(default_factory=dict)  # floor(rating) -> count


@dataclass
class DecadeSummary:
	decade: str  # label such as "1990s"
	count: int
	average_rating: float
	top_movie: Optional[str]


@dataclass
class PopularityScore:
	name: Optional[str]
	rating: float
	popularity: int  # raw number of ratings
	popularity_score: float  # number of ratings scaled to 0..10
	balanced_score: float  # weighted mix of rating and popularity_score
