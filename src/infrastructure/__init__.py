"""Infrastructure layer - Adapters for the role store and permission cache.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models and repositories (PostgreSQL)
- cache/: Redis adapter and role permission cache
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
