"""agecalc — age in years, months and days from a birth date."""

__version__ = "0.1.0"
