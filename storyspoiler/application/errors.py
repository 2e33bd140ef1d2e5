"""Scenario exceptions.

Clients return Result values; the scenario layer is where a failed
contract stops the run, so these are raised. ``ScenarioAssertionError``
derives from AssertionError so pytest reports it as a failed assertion.
"""

from storyspoiler.core.errors import DomainError


class ScenarioError(Exception):
    """Base class for scenario failures.

    Attributes:
        step: Name of the step that failed.
        domain_error: Underlying error value, when one exists.
    """

    def __init__(
        self, message: str, *, step: str, domain_error: DomainError | None = None
    ) -> None:
        super().__init__(message)
        self.step = step
        self.domain_error = domain_error


class SessionSetupError(ScenarioError):
    """Authentication failed; no authenticated client could be built."""


class ScenarioStateError(ScenarioError):
    """A step ran before the state it depends on was populated."""


class ScenarioTransportError(ScenarioError):
    """The API could not be reached (timeout, connection error)."""


class ScenarioAssertionError(ScenarioError, AssertionError):
    """A response violated the step's status or message contract."""
