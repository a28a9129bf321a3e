"""Repositories issuing parameterized SQL against `players` and `sessions`.

Route handlers import the modules, e.g. `from ..repositories import players as players_repo`.
"""
