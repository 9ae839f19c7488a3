from rulesim.core.assertions import assert_result, assert_summary
from rulesim.core.batch import make_delete, make_set, make_update
from rulesim.core.errors import (
    AuthorizationError,
    NotAuthorizedError,
    NotInitializedError,
    OracleError,
    RulesAssertionError,
    RulesCompilationError,
    RulesimError,
    UnsupportedOperationError,
)
from rulesim.services.context import RulesTestContext
from rulesim.services.database import Database

__all__ = [
    "Database",
    "RulesTestContext",
    "make_set",
    "make_update",
    "make_delete",
    "assert_summary",
    "assert_result",
    "RulesimError",
    "NotAuthorizedError",
    "NotInitializedError",
    "AuthorizationError",
    "OracleError",
    "RulesCompilationError",
    "UnsupportedOperationError",
    "RulesAssertionError",
]
