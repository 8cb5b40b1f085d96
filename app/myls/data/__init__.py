"""Bundled data files for myls."""
