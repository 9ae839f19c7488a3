"""
Function mocks: what `get()`, `exists()` and `getAfter()` return inside a
rule expression when it is evaluated against the fixture dataset.

The API matches an exact argument first and falls back to the `anyValue`
mock, so a path missing from the fixture reads as an absent document.
"""

from typing import Any, Iterable

from rulesim.config import settings
from rulesim.core.fields import apply_update
from rulesim.core.tree import DocumentTree
from rulesim.schemas.batch import BatchOperation, DeleteOperation, SetOperation, UpdateOperation
from rulesim.schemas.testing import ArgMatcher, FunctionMock, MockResult


def document_path(path: str) -> str:
    """Absolute document name as rules see it, e.g. /databases/(default)/documents/users/a."""
    return f"{settings.database_documents_prefix}{path}"


def exact_mock(function: str, path: str, value: Any) -> FunctionMock:
    return FunctionMock(
        function=function,
        args=[ArgMatcher(exact_value=document_path(path))],
        result=MockResult(value=value),
    )


def default_mock(function: str, value: Any) -> FunctionMock:
    return FunctionMock(
        function=function,
        args=[ArgMatcher(any_value={})],
        result=MockResult(value=value),
    )


def default_mocks() -> list[FunctionMock]:
    return [
        default_mock("get", None),
        default_mock("getAfter", None),
        default_mock("exists", False),
    ]


def build_mocks(tree: DocumentTree) -> list[FunctionMock]:
    """Wildcard defaults, then a `get` and an `exists` mock per fixture document."""
    mocks = default_mocks()
    for path, doc in tree.get_documents():
        mocks.append(exact_mock("get", path, {"data": doc.fields} if doc is not None else None))
        mocks.append(exact_mock("exists", path, doc is not None))
    return mocks


def after_state(tree: DocumentTree, operation: BatchOperation) -> dict | None:
    """Field map of `operation.document` once the operation is applied, None if deleted."""
    doc = tree.get_document(operation.document)
    before = doc.fields if doc is not None else None

    if isinstance(operation, SetOperation):
        return operation.data
    if isinstance(operation, DeleteOperation):
        return None
    if isinstance(operation, UpdateOperation):
        return apply_update(before, operation.data)
    return before


def build_after_mocks(tree: DocumentTree, batch: Iterable[BatchOperation]) -> list[FunctionMock]:
    """One exact `getAfter` mock per operation of the batch."""
    mocks = []
    for operation in batch:
        after = after_state(tree, operation)
        mocks.append(
            exact_mock("getAfter", operation.document, {"data": after} if after is not None else None)
        )
    return mocks
