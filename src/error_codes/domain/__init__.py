"""Domain layer: entries, static tables, resolvers, lookup and search.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
