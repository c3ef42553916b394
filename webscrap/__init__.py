"""Fetch HTML pages, filter their elements and render the matches as text, CSV, JSON, XML or YAML."""

__version__ = "0.1.0"