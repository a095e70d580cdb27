"""Top-level package for railnet.

railnet loads a railway network (named routes made of ordered stops),
reports on its routes and plans journeys between stations, ranking them
by fewest route changes and then shortest distance.
"""

__version__ = "0.1.0"
