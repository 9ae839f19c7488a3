"""
Translate a high-level assertion (auth, path, operation, expectation) into the
test cases the Rules API evaluates.
"""

from typing import Any, Optional, Sequence, Union

from rulesim.core.errors import UnsupportedOperationError
from rulesim.core.mocks import build_after_mocks, build_mocks, document_path
from rulesim.core.tree import DocumentTree
from rulesim.schemas.batch import BatchOperation, DeleteOperation, SetOperation, UpdateOperation
from rulesim.schemas.testing import Auth, Expectation, Method, Resource, TestCase, TestRequest

AuthLike = Union[Auth, dict[str, Any], None]


def to_auth(auth: AuthLike) -> Auth:
    if isinstance(auth, Auth):
        return auth
    return Auth.model_validate(auth or {})


def expectation_for(allow: bool) -> Expectation:
    return Expectation.ALLOW if allow else Expectation.DENY


def commit_method(tree: DocumentTree, operation: BatchOperation) -> Method:
    """
    Request method the API should see for one batch write: a set is a create
    when the document does not exist yet and an update otherwise.
    """
    if isinstance(operation, SetOperation):
        return Method.UPDATE if tree.has_document(operation.document) else Method.CREATE
    if isinstance(operation, UpdateOperation):
        return Method.UPDATE
    if isinstance(operation, DeleteOperation):
        return Method.DELETE
    raise UnsupportedOperationError(
        f"Unsupported batch operation: {type(operation).__name__}"
    )


def make_get_case(allow: bool, auth: AuthLike, path: str, tree: DocumentTree) -> TestCase:
    doc = tree.get_document(path)
    return TestCase(
        expectation=expectation_for(allow),
        request=TestRequest(auth=to_auth(auth), path=document_path(path), method=Method.GET),
        resource=Resource(data=doc.fields if doc is not None else None),
        function_mocks=build_mocks(tree),
    )


def make_commit_cases(
    allow: bool,
    auth: AuthLike,
    batch: Sequence[BatchOperation],
    tree: DocumentTree,
) -> list[TestCase]:
    """
    One case per write. Every case carries the `getAfter` mocks of the whole
    batch, so a rule on one write can see the others.
    """
    expectation = expectation_for(allow)
    request_auth = to_auth(auth)
    function_mocks = build_mocks(tree) + build_after_mocks(tree, batch)

    cases = []
    for operation in batch:
        method = commit_method(tree, operation)
        data: Optional[dict] = None if isinstance(operation, DeleteOperation) else operation.data
        cases.append(
            TestCase(
                expectation=expectation,
                request=TestRequest(
                    auth=request_auth,
                    path=document_path(operation.document),
                    method=method,
                ),
                resource=Resource(data=data),
                function_mocks=function_mocks,
            )
        )
    return cases
