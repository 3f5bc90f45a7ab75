"""Route blueprints package for API endpoints.

This package contains Flask blueprints for each route group: the
greeting and health check, the owned pokemon collection and battle
recommendations. Each module documents its endpoint responsibilities.
"""
