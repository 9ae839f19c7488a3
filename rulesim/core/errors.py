"""
Error taxonomy.

Everything raised on purpose derives from `RulesimError`, except
`RulesAssertionError`, which also derives from `AssertionError` so a test
runner reports it as an ordinary failed assertion.
"""


class RulesimError(Exception):
    """Base class for every error raised by rulesim."""


class NotAuthorizedError(RulesimError):
    """An API call was attempted before `Database.authorize()` completed."""


class NotInitializedError(RulesimError):
    """A suite context was used before its first `authorize()`."""


class AuthorizationError(RulesimError):
    """The credential was rejected or the token exchange failed."""


class OracleError(RulesimError):
    """The Rules API call failed or returned something unusable."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class RulesCompilationError(RulesimError):
    """The rules source did not compile; `issues` holds what the API reported."""

    def __init__(self, issues: list):
        self.issues = issues
        super().__init__(
            "\n\n".join(
                f"Line {issue.source_position.line}, column {issue.source_position.column}: "
                f"{issue.description}"
                for issue in issues
            )
        )


class UnsupportedOperationError(RulesimError):
    """A batch operation kind has no translation to a request method."""


class RulesAssertionError(RulesimError, AssertionError):
    """A request was allowed where denial was expected, or the other way round."""
