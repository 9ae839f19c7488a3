from rulesim.schemas.dataset import (
    Document,
    Collection,
    Collections,
    DocumentEntry,
    Credential,
    parse_collections,
)
from rulesim.schemas.batch import SetOperation, UpdateOperation, DeleteOperation, BatchOperation
from rulesim.schemas.testing import (
    Expectation,
    Method,
    TestState,
    Auth,
    ArgMatcher,
    MockResult,
    FunctionMock,
    TestRequest,
    Resource,
    TestCase,
    TestResult,
    Issue,
    SourcePosition,
    TestRulesetResponse,
    CaseResult,
    TestSummary,
)

__all__ = [
    "Document",
    "Collection",
    "Collections",
    "DocumentEntry",
    "Credential",
    "parse_collections",
    "SetOperation",
    "UpdateOperation",
    "DeleteOperation",
    "BatchOperation",
    "Expectation",
    "Method",
    "TestState",
    "Auth",
    "ArgMatcher",
    "MockResult",
    "FunctionMock",
    "TestRequest",
    "Resource",
    "TestCase",
    "TestResult",
    "Issue",
    "SourcePosition",
    "TestRulesetResponse",
    "CaseResult",
    "TestSummary",
]
