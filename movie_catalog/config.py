"""
Movie Catalog — Configuration: paths, column mapping, environment overrides.
"""
import os
import sys
from pathlib import Path

from loguru import logger

ROOT = Path(__file__).resolve().parents[1]

# ---------------------------------------------------------------------------
# Paths — override with MOVIE_CATALOG_DATA for deployment
# ---------------------------------------------------------------------------
DATA_PATH = Path(os.environ.get("MOVIE_CATALOG_DATA", str(ROOT / "data" / "movies.csv")))

# ---------------------------------------------------------------------------
# Logging / HTTP settings
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("MOVIE_CATALOG_LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.environ.get("MOVIE_CATALOG_CORS_ORIGINS", "*").split(",") if o.strip()]
API_URL = os.environ.get("MOVIE_CATALOG_API_URL", "http://localhost:8000")

# ---------------------------------------------------------------------------
# Column mapping from raw CSV header → Movie field names
# ---------------------------------------------------------------------------
COLUMN_MAP = {
	"Rank": "rank",
	"Year": "year",
	"Duration": "duration_text",
	"AgeLimit": "age_limit",
	"Rating": "rating",
	"NumberOfRatings": "number_of_ratings",
	"Metascore": "metascore",
	"Description": "description",
	"Name": "name",
}


def configure_logging(level: str = LOG_LEVEL) -> None:
	"""Replace loguru's default sink with a stderr sink at the requested level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
