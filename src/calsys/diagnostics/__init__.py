"""Diagnostics package.

- pretty_month: text month grids (no extra dependencies)
- round_trip, leap_years: require the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "leap_years"]
