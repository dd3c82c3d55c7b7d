"""Presentation layer - REST API and CLI."""
