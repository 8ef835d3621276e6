"""Application environment types.

Defines the runtime environments for the host application.
Used by Settings to determine environment-specific behavior
(log rendering, API docs exposure).

Environments:
- DEVELOPMENT: Local development, API docs enabled
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
