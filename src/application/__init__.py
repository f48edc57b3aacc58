"""Application layer - Use cases and orchestration.

Structure:
- services/: Role resolution, permission caching, dual-version assignment
  updates and merchant resolution
- commands/: Command dataclasses and handlers (role mutations)

The application layer orchestrates domain logic through protocols; it never
imports infrastructure.
"""
