#!/usr/bin/env python
"""
Catalog demonstration script - walks through the core operations.

This script demonstrates:
- Adding and rating movies
- Top rated ordering
- Genre, director and keyword queries
- Lookup and removal

Usage:
    python scripts/demo_catalog.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.catalog import load_sample_catalog
from app.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def print_movies(movies):
    if not movies:
        print("  (none)")
    for movie in movies:
        average = movie.average_rating()
        average_text = f"{average:.2f}" if average is not None else "unrated"
        print(f"  [{movie.id:>3}] {movie.title} ({movie.release_year}) "
              f"- {movie.director}, {movie.genre}, avg {average_text}")


def main():
    setup_logging(level="WARNING")
    catalog = load_sample_catalog()

    print_section("1. Top Rated Movies")
    print_movies(catalog.top_rated_movies())

    print_section("2. Movies by Genre (Sci-Fi)")
    print_movies(catalog.movies_by_genre("Sci-Fi"))

    print_section("3. Movies by Director (Christopher Nolan)")
    print_movies(catalog.movies_by_director("Christopher Nolan"))

    print_section("4. Search for 'Inter'")
    print_movies(catalog.search_by_keyword("Inter"))

    print_section("5. Movie with ID '1'")
    movie = catalog.get_movie("1")
    print(f"  {movie.to_dict()}")

    print_section("6. Removing Movie ID '3'")
    print(f"  Removed: {catalog.remove_movie('3')}")
    print("\nTop rated after removal:")
    print_movies(catalog.top_rated_movies())


if __name__ == "__main__":
    main()
