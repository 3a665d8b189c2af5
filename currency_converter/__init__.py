"""
Currency Converter.

Static-rate currency conversion with a live clock and a short
in-memory history of confirmed conversions.
"""

__version__ = "0.1.0"
