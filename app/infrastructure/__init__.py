"""Infrastructure layer: persistence (SQLAlchemy) and cache (Redis).

Implements the repository protocols from app.application.interfaces.
"""
