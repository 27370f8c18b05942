"""Diagnostics package.

- round_trip, pretty_month, nowruz_table: stdlib only
- leap_rules: table is stdlib only; --plot needs the diagnostics extras
"""

__all__ = ["round_trip", "pretty_month", "nowruz_table", "leap_rules"]
