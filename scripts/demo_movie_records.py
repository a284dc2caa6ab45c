#!/usr/bin/env python
"""
Movie record demonstration script - walks through the record helpers.

This script demonstrates:
- Updating rating, genre and cast of a movie record
- Removing the director
- Reading title, year and derived properties
- How rejected input is reported

Usage:
    python scripts/demo_movie_records.py [--debug]
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_records import (
    add_cast_member,
    add_movie_genre,
    get_allowed_genres,
    get_movie_keys,
    get_movie_properties_count,
    get_movie_title,
    get_movie_year,
    is_movie_classic,
    remove_director_property,
    set_movie_rating,
    try_add_movie_genre,
)
from movie_records.utils import configure_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def sample_movie():
    """Build the sample record used throughout the demo."""
    return {
        "id": 1,
        "title": "Toy Story",
        "director": "John Lasseter",
        "year": 1995,
        "genre": "Animation",
        "rating": 8.3,
        "cast": ["Tom Hanks", "Tim Allen", "Don Rickles"],
    }


def demo_manipulation():
    """Demonstrate the mutation helpers."""
    print_section("1. Updating a Movie")

    movie = sample_movie()
    print(f"\nOriginal:          {movie}")

    movie = set_movie_rating(movie, 9.1)
    print(f"Rating 9.1:        {movie}")

    movie = add_movie_genre(movie, "Family")
    print(f"Genre Family:      {movie}")

    movie = remove_director_property(movie)
    print(f"Without director:  {movie}")

    movie = add_cast_member(movie, "Joan Cusack")
    print(f"New cast member:   {movie}")

    print(f"\nAllowed genres: {', '.join(get_allowed_genres())}")


def demo_rejected_input():
    """Demonstrate rejected input (diagnostics go to the log)."""
    print_section("2. Rejected Input")

    print(f"\nset_movie_rating(None, 8.5) -> {set_movie_rating(None, 8.5)!r}")
    print(f"add_movie_genre({{}}, 123)   -> {add_movie_genre({}, 123)!r}")

    result = try_add_movie_genre({"title": "Alien"}, "Horror")
    print(f"\ntry_add_movie_genre(..., 'Horror'):")
    print(f"  ok:     {result.ok}")
    print(f"  reason: {result.failure.reason.value}")


def demo_accessors():
    """Demonstrate the accessors."""
    print_section("3. Reading a Movie")

    movie = sample_movie()
    print(f"\n  Title:      {get_movie_title(movie)}")
    print(f"  Year:       {get_movie_year(movie)}")
    print(f"  Classic:    {is_movie_classic(movie)}")
    print(f"  Keys:       {', '.join(get_movie_keys(movie))}")
    print(f"  Properties: {get_movie_properties_count(movie)}")


def main():
    parser = argparse.ArgumentParser(description="Movie record helpers demo")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_logging(debug=args.debug)

    demo_manipulation()
    demo_rejected_input()
    demo_accessors()

    print("\nDemo complete.")


if __name__ == "__main__":
    main()
