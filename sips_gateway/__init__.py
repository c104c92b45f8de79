"""
SIPS Gateway - Atos SIPS payment gateway adapter

Drives the vendor-supplied SIPS request and response binaries, parses
their `!`-delimited output and handles currency code and amount formats.
"""

__version__ = "0.1.0"
