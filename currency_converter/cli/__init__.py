"""Command line interface for Currency Converter."""
