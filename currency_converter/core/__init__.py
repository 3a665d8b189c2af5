"""
Core modules for Currency Converter.

This package contains the currency table, conversion, formatting,
history ledger and the converter session state.
"""
