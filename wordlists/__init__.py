"""Bundled word lists, read with importlib.resources."""
