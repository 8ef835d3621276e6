"""Test suite for the modular monolith host.

Test structure:
- unit/: Unit tests - domain logic, core kernel and adapters in isolation
- api/: API endpoint tests - the host application end-to-end over HTTP
"""
