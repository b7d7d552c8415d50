"""
Streamlit dashboard for the Movie Catalog.
Calls the FastAPI server at http://localhost:8000 to fetch dashboard data,
or runs locally by loading the CSV dataset like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# dataclass -> dict so local results look like API payloads
from dataclasses import asdict
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from movie_catalog.catalog import CatalogStore  # load movies from file
from movie_catalog.query_engine import MovieQueryEngine  # filters and search
from movie_catalog.analytics import CatalogAnalytics  # dashboard aggregates
from movie_catalog.config import API_URL, DATA_PATH  # defaults

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Catalog Dashboard")  # friendly header


class LocalBackend:
	"""Answers dashboard requests in-process, returning API-shaped payloads."""

	def __init__(self, catalog: CatalogStore):
		self.engine = MovieQueryEngine(catalog)
		self.analytics = CatalogAnalytics(catalog)

	def get(self, path: str, params: Optional[dict] = None):
		params = params or {}
		routes = {
			"/api/movies/top": lambda: self.engine.top_rated(int(params.get("count", 10))),
			"/api/movies/popular": lambda: self.engine.most_popular(int(params.get("count", 10))),
			"/api/movies/critically-acclaimed": lambda: self.engine.critically_acclaimed(),
			"/api/movies/family-friendly": lambda: self.engine.family_friendly(),
			"/api/movies/quick-watch": lambda: self.engine.quick_watch(),
			"/api/movies/search": lambda: self.engine.search(params.get("query", "")),
			"/api/analytics/by-decade": lambda: self.analytics.by_decade(),
			"/api/analytics/rating-vs-popularity": lambda: self.analytics.rating_vs_popularity(),
		}
		if path == "/api/analytics/statistics":
			stats = asdict(self.analytics.statistics())
			stats["year_range"] = {"min": stats.pop("min_year"), "max": stats.pop("max_year")}
			return stats
		return [asdict(item) for item in routes[path]()]


class ApiBackend:
	"""Fetches dashboard data from the FastAPI server."""

	def __init__(self, base_url: str):
		self.base_url = base_url.rstrip("/")

	def get(self, path: str, params: Optional[dict] = None):
		resp = requests.get(f"{self.base_url}{path}", params=params, timeout=30)
		resp.raise_for_status()  # raise error if server responded with an error code
		return resp.json()  # parse JSON returned by API


# Cache the local catalog so we only parse the CSV once per session
@st.cache_resource(show_spinner=True)
def init_local_backend() -> LocalBackend:
	"""Create a LocalBackend from the dataset; an unreadable file gives an empty catalog."""
	return LocalBackend(CatalogStore.from_csv(DATA_PATH))


def show_movies(title: str, movies: list, limit: Optional[int] = None):
	"""Render a list of movie payloads as a compact table."""
	st.subheader(title)
	if not movies:
		st.caption("No movies.")
		return
	rows = [
		{
			"Rank": m["rank"],
			"Name": m.get("name"),
			"Year": m["year"],
			"Rating": m["rating"],
			"Ratings": f"{m['number_of_ratings']:,}",
			"Metascore": m.get("metascore"),
			"Duration": m.get("duration_text"),
			"Age": m.get("age_limit"),
		}
		for m in movies[:limit]
	]
	st.dataframe(rows, hide_index=True, width="stretch")


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", API_URL)  # where the API lives
	use_local = st.toggle("Use local catalog", value=False, help="If enabled or API is unreachable, the dashboard reads the CSV directly.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		st.sidebar.info("API not reachable; will use local catalog.")  # inform user

backend = ApiBackend(api_url) if api_available else init_local_backend()

try:
	# Statistics header row
	stats = backend.get("/api/analytics/statistics")
	c1, c2, c3, c4 = st.columns(4)
	c1.metric("Movies", stats["total_movies"])
	c2.metric("Average rating", f"{stats['average_rating']:.2f}")
	year_range = stats.get("year_range") or {}
	c3.metric("Years", f"{year_range.get('min') or '-'} – {year_range.get('max') or '-'}")
	c4.metric("Most popular", stats.get("most_popular") or "-")
	if stats.get("rating_distribution"):
		distribution = sorted(stats["rating_distribution"].items(), key=lambda kv: int(kv[0]))
		st.bar_chart(
			{"Rating": [f"{k}.x" for k, _ in distribution], "Movies": [v for _, v in distribution]},
			x="Rating",
			y="Movies",
		)
	st.divider()  # visual separator

	# Search box
	query = st.text_input("Search names and descriptions", placeholder="e.g., prison, batman, war")
	if query.strip():
		show_movies(f"Results for '{query}'", backend.get("/api/movies/search", {"query": query}))
		st.divider()

	left, right = st.columns(2)
	with left:
		show_movies("Top 5", backend.get("/api/movies/top", {"count": 5}))
		show_movies("Critically acclaimed", backend.get("/api/movies/critically-acclaimed"))
		show_movies("Quick watch", backend.get("/api/movies/quick-watch"))
	with right:
		show_movies("Most popular", backend.get("/api/movies/popular"))
		show_movies("Family friendly", backend.get("/api/movies/family-friendly"))

		st.subheader("Rating vs popularity")
		scores = backend.get("/api/analytics/rating-vs-popularity")[:10]
		st.dataframe(
			[{"Name": s["name"], "Rating": s["rating"], "Balanced": round(s["balanced_score"], 2)} for s in scores],
			hide_index=True,
			width="stretch",
		)

	st.subheader("By decade")
	st.dataframe(backend.get("/api/analytics/by-decade"), hide_index=True, width="stretch")

except requests.RequestException as e:  # network/API errors
	st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if api_available:
	st.sidebar.caption("Mode: API client")  # mode label
else:
	st.sidebar.caption(f"Mode: Local catalog ({DATA_PATH.name})")  # mode label
