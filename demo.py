#!/usr/bin/env python3
"""
Demo script for the Travel Log
Loads a set of sample trips and runs a few searches
"""

from pathlib import Path

from travel_log.application.engine import TravelLogEngine
from travel_log.application.config import Config
from travel_log.search.presentation import describe, display_order

SAMPLE_TRIPS = [
    # 2025 trips
    ("London, GB", "August 9-15, 2025", 2025, 7),
    ("Milan, IT", "July 13-20, 2025", 2025, 6),
    ("Charleston, SC", "June 8-12, 2025", 2025, 5),
    ("Mexico City, MX", "April 11-16, 2025", 2025, 3),
    ("Los Angeles, CA", "March 11-17, 2025", 2025, 2),
    ("Los Angeles, CA", "February 12-18, 2025", 2025, 1),
    ("Bridgetown, BB", "January 26-31, 2025", 2025, 0),

    # 2024 trips
    ("Puerto Vallarta, MX", "November 9, 2024", 2024, 10),
    ("Milan, IT", "October 8-14, 2024", 2024, 9),
    ("Copenhagen, DK", "September 7-12, 2024", 2024, 8),
    ("London, GB", "July 9-16, 2024", 2024, 6),
    ("Palma Mallorca, ES", "June 7-12, 2024", 2024, 5),
    ("Nice, FR", "May 9-15, 2024", 2024, 4),
    ("Miami, FL", "April 24-30, 2024", 2024, 3),
    ("Tenerife, ES", "April 10-16, 2024", 2024, 3),
    ("Miami, FL", "March 10-14, 2024", 2024, 2),
    ("Casablanca, MA", "January 28-February 3, 2024", 2024, 0),
]

DEMO_QUERIES = ["london", "2024 summer", "milan 2025", "sept", "mia"]


def main():
    """Run a simple demo."""
    print("🧭 Travel Log Demo")
    print("=" * 50)

    config = Config(storage_path=Path("demo_storage"))
    engine = TravelLogEngine(config)
    engine.initialize()
    engine.store.clear()

    print("\n📥 Loading sample trips...")
    for location, details, year, month in SAMPLE_TRIPS:
        engine.store.add_entry(year, month, location, details)
    engine.store.save()

    stats = engine.get_statistics()
    print(f"✅ Loaded {stats['total_entries']} trips across {stats['years']} years")

    for query in DEMO_QUERIES:
        print(f"\n🔍 {query}")
        results = display_order(engine.search(query))
        if not results:
            print("   No results found")
        for result in results:
            data = describe(result)
            print(f"   [{data['score']:>3}] {data['title']} - {data['subtitle']}")

    print("\n✨ Demo complete! Try: python main.py search \"paris\"")


if __name__ == "__main__":
    main()
