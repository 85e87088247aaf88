"""Logging configuration for iso_weekdate."""
