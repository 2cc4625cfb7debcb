#!/usr/bin/env python3
"""
Travel Log

Record trips by year and month and find them again with
natural-language search ("paris 2023", "summer", "sept").
"""

from travel_log.cli.main import main

if __name__ == "__main__":
    main()
