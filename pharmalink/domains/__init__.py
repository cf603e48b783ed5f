"""
Business domains. Each domain follows the same layering:

- domain: entities and value objects
- application: ports (repository protocols) and use cases
- infrastructure: SQLAlchemy repositories and external adapters
- api: FastAPI routes, request schemas and use case dependencies
"""
