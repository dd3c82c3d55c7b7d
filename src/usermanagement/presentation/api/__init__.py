"""FastAPI REST API for the user management service."""
