"""Renderers — the unit of request handling bound to a route."""
