"""A tile-based puzzle game: collect every item, then reach the exit.

Includes map loading, game rules, an XPM reader and a pygame front end.
"""

__version__ = "0.1.0"