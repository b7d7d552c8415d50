"""
Load the movie dataset and log a summary of it.

This script:
1) Loads movies from data/movies.csv (or the path given as first argument)
2) Computes catalog statistics
3) Logs the per-decade breakdown

Usage:
    python -m scripts.catalog_report [path/to/movies.csv]
"""

import sys  # optional dataset path argument
import time  # measure load time
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from movie_catalog.catalog import CatalogStore  # data ingestion
from movie_catalog.analytics import CatalogAnalytics  # aggregates
from movie_catalog.config import DATA_PATH, LOG_LEVEL, configure_logging


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	configure_logging(LOG_LEVEL)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Catalog Report")
	logger.info("=" * 60)

	data_path = Path(argv[0]) if argv else DATA_PATH  # input dataset

	# 1) Load data
	logger.info("[1/3] Loading movies...")
	t0 = time.time()  # start timer
	catalog = CatalogStore.from_csv(data_path)  # read dataset
	logger.info(f"[OK] Loaded {len(catalog)} movies in {time.time() - t0:.2f}s")  # confirm count
	if not catalog:
		logger.warning("Catalog is empty; nothing to report.")
		return 1

	analytics = CatalogAnalytics(catalog)

	# 2) Statistics
	logger.info("[2/3] Statistics")
	stats = analytics.statistics()
	logger.info(f"  Average rating: {stats.average_rating:.2f}")
	logger.info(f"  Years: {stats.min_year} - {stats.max_year}")
	logger.info(f"  Most popular: {stats.most_popular}")
	logger.info(f"  Highest rated: {stats.highest_rated}")
	for bucket, count in stats.rating_distribution.items():
		logger.info(f"  Rating {bucket}.x: {count}")

	# 3) Decades
	logger.info("[3/3] By decade")
	for d in analytics.by_decade():
		logger.info(f"  {d.decade}: {d.count} movies, avg {d.average_rating:.2f}, top '{d.top_movie}'")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
