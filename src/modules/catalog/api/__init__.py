"""Catalog HTTP surface (schemas, endpoints, route registry)."""
