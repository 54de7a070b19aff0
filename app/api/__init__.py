"""Presentation layer: HTTP API routers."""
