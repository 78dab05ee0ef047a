"""
Trip logging package.

Data access, aggregation, report rendering and the user-facing flows live here.
The command-line front end in triplog.cli is a thin wrapper over triplog.services.
"""

__all__: list[str] = []
