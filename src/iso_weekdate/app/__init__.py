"""Command line entry points for iso_weekdate."""
