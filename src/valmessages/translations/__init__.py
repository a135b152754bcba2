"""Packaged default validation message tables, one JSON file per culture code."""
