"""Stitch - style checking configuration for Swift sources."""

__version__ = "0.1.0"
