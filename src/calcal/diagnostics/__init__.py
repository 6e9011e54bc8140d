"""Diagnostics package.

- round_trip, leap_years, new_years_table: plain-text checks and tables
- hindu_leap_months: optional plot (requires the diagnostics extras)
"""

__all__ = ["round_trip", "leap_years", "new_years_table", "hindu_leap_months"]
