"""User management service.

Layers:
- domain: User aggregate, value objects, events, repository interface
- application: lifecycle service, DTOs, event publisher port
- infrastructure: SQLAlchemy persistence, HTTP event channel
- presentation: FastAPI REST API and Typer CLI
"""
