"""Shared cross-cutting helpers: logging and telemetry.

Used by application, infrastructure, and API layers. No business logic.
"""
