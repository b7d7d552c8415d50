"""
FastAPI server exposing the movie catalog API.
Endpoints:
- GET /health: basic health check
- /api/movies/...: lookups, filters and search
- /api/analytics/...: statistics, decade breakdown, rating vs popularity
- /api/recommendations/...: similar-by-year, hidden gems, crowd pleasers, time based

Startup loads the CSV dataset once into an immutable CatalogStore.
If the dataset cannot be read, the server still starts with an empty catalog.
"""

# Import standard libraries for timing and typing
import time  # measure startup latency
from contextlib import asynccontextmanager  # lifespan hook
from dataclasses import asdict  # dataclass -> dict for response models
from pathlib import Path  # path-safe filesystem handling
from typing import Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import Depends, FastAPI, HTTPException, Query, Request  # FastAPI primitives
from fastapi.middleware.cors import CORSMiddleware  # dashboard runs on another origin
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for loading and querying
from movie_catalog.catalog import CatalogStore  # immutable movie collection
from movie_catalog.query_engine import MovieQueryEngine  # filters and search
from movie_catalog.recommendations import Recommender  # rule-based lists
from movie_catalog.analytics import CatalogAnalytics  # aggregates
from movie_catalog.models import Movie  # movie data class
from movie_catalog.config import CORS_ORIGINS, DATA_PATH, LOG_LEVEL, configure_logging

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	rank: int  # position in the source list
	year: int  # release year
	duration_text: Optional[str] = None  # e.g. "2h 22m"
	age_limit: Optional[str] = None  # certificate
	rating: float  # average rating
	number_of_ratings: int  # expanded rating count
	metascore: Optional[int] = None  # None when unrated
	description: Optional[str] = None  # synopsis
	name: Optional[str] = None  # title


class YearRangeOut(BaseModel):
	min: Optional[int] = None
	max: Optional[int] = None


class StatisticsOut(BaseModel):
	total_movies: int
	average_rating: float
	year_range: YearRangeOut
	most_popular: Optional[str] = None
	highest_rated: Optional[str] = None
	rating_distribution: Dict[int, int]


class DecadeOut(BaseModel):
	decade: str
	count: int
	average_rating: float
	top_movie: Optional[str] = None


class RatingPopularityOut(BaseModel):
	name: Optional[str] = None
	rating: float
	popularity: int
	popularity_score: float
	balanced_score: float


class CatalogServices:
	"""Engines sharing the single catalog created at startup."""

	def __init__(self, catalog: CatalogStore):
		self.catalog = catalog
		self.engine = MovieQueryEngine(catalog)
		self.recommender = Recommender(catalog)
		self.analytics = CatalogAnalytics(catalog)


def get_services(request: Request) -> CatalogServices:
	"""Dependency returning the services built during startup."""
	services = getattr(request.app.state, 'services', None)
	if services is None:
		raise HTTPException(503, "Catalog not loaded yet")
	return services


def _movies_out(movies: List[Movie]) -> List[MovieOut]:
	return [MovieOut(**asdict(m)) for m in movies]


def create_app(data_path: Optional[Path] = None) -> FastAPI:
	"""Build the FastAPI application; the dataset is read once in the lifespan hook."""

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		"""Load the catalog once and keep it for the lifetime of the process."""
		configure_logging(LOG_LEVEL)
		start = time.time()  # start timer for startup latency
		path = data_path or DATA_PATH
		logger.info(f"[API] Startup: loading catalog from {path}...")  # log intent

		catalog = CatalogStore.from_csv(path)  # never raises; empty on failure
		app.state.services = CatalogServices(catalog)
		app.state.startup_seconds = time.time() - start  # elapsed seconds

		if catalog:
			logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s with {len(catalog)} movies.")
		else:
			logger.warning("[API] Startup complete with an empty catalog.")
		yield

	app = FastAPI(title="Movie Catalog API", version="1.0.0", lifespan=lifespan)  # web app
	app.add_middleware(
		CORSMiddleware,
		allow_origins=CORS_ORIGINS,
		allow_methods=["GET"],
		allow_headers=["*"],
	)

	# Simple health endpoint for readiness checks
	@app.get("/health")
	async def health(request: Request):
		"""Return minimal health info for liveness/readiness probes."""
		services = getattr(request.app.state, 'services', None)
		return {
			"status": "ok",  # constant indicator
			"catalog_ready": services is not None,  # True once startup finished
			"movie_count": len(services.catalog) if services else 0,
			"startup_seconds": round(getattr(request.app.state, 'startup_seconds', 0.0), 2),
		}

	# ------------------------------------------------------------------
	# Movies
	# ------------------------------------------------------------------

	@app.get("/api/movies", response_model=List[MovieOut])
	def all_movies(services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.all())

	@app.get("/api/movies/year/{year}", response_model=List[MovieOut])
	def movies_by_year(year: int, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.by_year(year))

	@app.get("/api/movies/top", response_model=List[MovieOut])
	@app.get("/api/movies/top/{count}", response_model=List[MovieOut])
	def top_rated(count: int = 10, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.top_rated(count))

	@app.get("/api/movies/filter/rating", response_model=List[MovieOut])
	def filter_by_rating(
		min_rating: float = Query(0.0),
		max_rating: float = Query(10.0),
		services: CatalogServices = Depends(get_services),
	):
		return _movies_out(services.engine.by_rating_range(min_rating, max_rating))

	@app.get("/api/movies/filter/year-range", response_model=List[MovieOut])
	def filter_by_year_range(
		start_year: int = Query(...),
		end_year: int = Query(...),
		services: CatalogServices = Depends(get_services),
	):
		return _movies_out(services.engine.by_year_range(start_year, end_year))

	@app.get("/api/movies/filter/duration", response_model=List[MovieOut])
	def filter_by_duration(max_minutes: int = 180, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.by_max_duration(max_minutes))

	@app.get("/api/movies/filter/age-rating/{age_limit}", response_model=List[MovieOut])
	def filter_by_age_rating(age_limit: str, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.by_age_rating(age_limit))

	# Substring search over names and descriptions
	@app.get("/api/movies/search", response_model=List[MovieOut])
	def search(
		query: str = Query("", description="Text to look for in names and descriptions"),
		services: CatalogServices = Depends(get_services),
	):
		logger.debug(f"[API] /search query='{query}'")  # debug log of input
		try:
			results = services.engine.search(query)
		except ValueError as e:
			raise HTTPException(400, str(e))
		logger.info(f"[API] /search served {len(results)} results")  # summary
		return _movies_out(results)

	@app.get("/api/movies/popular", response_model=List[MovieOut])
	def most_popular(count: int = 10, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.most_popular(count))

	@app.get("/api/movies/critically-acclaimed", response_model=List[MovieOut])
	def critically_acclaimed(min_metascore: int = 80, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.critically_acclaimed(min_metascore))

	@app.get("/api/movies/family-friendly", response_model=List[MovieOut])
	def family_friendly(services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.family_friendly())

	@app.get("/api/movies/quick-watch", response_model=List[MovieOut])
	def quick_watch(max_minutes: int = 120, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.engine.quick_watch(max_minutes))

	# Declared after the fixed paths so "top", "popular", ... are not read as ranks
	@app.get("/api/movies/{rank}", response_model=MovieOut)
	def movie_by_rank(rank: int, services: CatalogServices = Depends(get_services)):
		movie = services.engine.by_rank(rank)
		if movie is None:
			raise HTTPException(404, f"No movie with rank {rank}")
		return MovieOut(**asdict(movie))

	# ------------------------------------------------------------------
	# Analytics
	# ------------------------------------------------------------------

	@app.get("/api/analytics/statistics", response_model=StatisticsOut)
	def statistics(services: CatalogServices = Depends(get_services)):
		stats = services.analytics.statistics()
		return StatisticsOut(
			total_movies=stats.total_movies,
			average_rating=stats.average_rating,
			year_range=YearRangeOut(min=stats.min_year, max=stats.max_year),
			most_popular=stats.most_popular,
			highest_rated=stats.highest_rated,
			rating_distribution=stats.rating_distribution,
		)

	@app.get("/api/analytics/by-decade", response_model=List[DecadeOut])
	def by_decade(services: CatalogServices = Depends(get_services)):
		return [DecadeOut(**asdict(d)) for d in services.analytics.by_decade()]

	@app.get("/api/analytics/rating-vs-popularity", response_model=List[RatingPopularityOut])
	def rating_vs_popularity(services: CatalogServices = Depends(get_services)):
		return [RatingPopularityOut(**asdict(s)) for s in services.analytics.rating_vs_popularity()]

	# ------------------------------------------------------------------
	# Recommendations
	# ------------------------------------------------------------------

	@app.get("/api/recommendations/similar-year/{rank}", response_model=List[MovieOut])
	def similar_by_year(rank: int, count: int = 5, services: CatalogServices = Depends(get_services)):
		similar = services.recommender.similar_by_year(rank, count)
		if similar is None:
			raise HTTPException(404, f"No movie with rank {rank}")
		return _movies_out(similar)

	@app.get("/api/recommendations/hidden-gems", response_model=List[MovieOut])
	def hidden_gems(count: int = 10, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.recommender.hidden_gems(count))

	@app.get("/api/recommendations/crowd-pleasers", response_model=List[MovieOut])
	def crowd_pleasers(count: int = 10, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.recommender.crowd_pleasers(count))

	@app.get("/api/recommendations/time-based", response_model=List[MovieOut])
	def time_based(available_minutes: int = 120, services: CatalogServices = Depends(get_services)):
		return _movies_out(services.recommender.time_based(available_minutes))

	return app


# Application instance used by `uvicorn api:app`
app = create_app()
