"""Runtime environment types.

Environments:
- DEVELOPMENT: Local runs against the remote API, human-readable logs
- TESTING: Automated runs against mocks and the in-process fake API
- CI: Continuous integration
- PRODUCTION: Scheduled runs against the live deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
