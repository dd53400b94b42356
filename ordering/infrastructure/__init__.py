"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer:

- Persistence (SQLAlchemy repository, in-memory repository, ORM mapper)
- Event delivery (in-process publisher)
- Request schemas (pydantic) that build application commands

This layer depends on domain and application layers,
but they do not depend on it.
"""
