"""
API Module - FastAPI Backend

This module provides the REST API for the BrewOS demo engine.
It resolves demo mode and serves synthetic machine statistics.

Key Components:
- main.py: FastAPI application and root endpoints
- models.py: Pydantic schemas for response validation
- database.py: SQLAlchemy connection and the durable demo flag
- dependencies.py: Shared route dependencies
- routes/: API endpoint implementations

Endpoints:
- GET /api/v1/demo/status: Resolve demo mode from ?demo / ?exitDemo
- POST /api/v1/demo/activate, /api/v1/demo/deactivate
- GET /api/v1/demo/logs, /api/v1/demo/schedules
- GET /api/v1/stats: Full synthetic statistics bundle
"""

__version__ = "0.1.0"
