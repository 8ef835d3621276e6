"""Catalog application layer (commands, queries, validators, handlers)."""
