"""Monetary domain package.

This package contains the Currency and Locale descriptors with their predefined catalogs,
and the Money value type with exact Decimal arithmetic and explicit rounding.
"""
