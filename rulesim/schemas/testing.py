"""
Wire schema of the Rules API `projects.test` call.

Field aliases carry the camelCase names the API expects; `to_wire()` drops
whatever was never set so optional blocks (resource, auth claims) stay out
of the payload, while explicit `None` values still go out as JSON null.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Expectation(str, Enum):
    ALLOW = "ALLOW"
    DENY = "DENY"


class Method(str, Enum):
    GET = "get"
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    READ = "read"
    WRITE = "write"


class TestState(str, Enum):
    __test__ = False

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Auth(WireModel):
    """Identity simulated for `request.auth`; no uid means unauthenticated."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    uid: Optional[str] = None
    token: Optional[dict[str, Any]] = None


class ArgMatcher(WireModel):
    exact_value: Optional[Any] = None
    any_value: Optional[dict] = Field(None, alias="anyValue")


class MockResult(WireModel):
    value: Any = None


class FunctionMock(WireModel):
    function: str
    args: list[ArgMatcher]
    result: MockResult


class TestRequest(WireModel):
    __test__ = False

    auth: Auth
    path: str
    method: Method


class Resource(WireModel):
    data: Optional[dict[str, Any]] = None


class TestCase(WireModel):
    __test__ = False

    expectation: Expectation
    request: TestRequest
    resource: Optional[Resource] = None
    function_mocks: list[FunctionMock] = Field(default_factory=list, alias="functionMocks")


class TestResult(WireModel):
    __test__ = False
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    state: TestState
    debug_messages: list[str] = Field(default_factory=list, alias="debugMessages")


class SourcePosition(WireModel):
    file_name: Optional[str] = Field(None, alias="fileName")
    line: int = 0
    column: int = 0


class Issue(WireModel):
    source_position: SourcePosition = Field(default_factory=SourcePosition, alias="sourcePosition")
    description: str = ""
    severity: Optional[str] = None


class TestRulesetResponse(WireModel):
    __test__ = False

    issues: list[Issue] = Field(default_factory=list)
    test_results: list[TestResult] = Field(default_factory=list, alias="testResults")


class CaseResult(BaseModel):
    case: TestCase
    result: TestResult


class TestSummary(BaseModel):
    __test__ = False

    success: bool
    tests: list[CaseResult]
