"""
Database: a fixture dataset plus a rules source, checked against the
Firebase Rules API.

Every `can_*` / `cannot_*` call snapshots the current dataset and rules,
builds the test cases, evaluates them in one API round trip and returns a
`TestSummary`; pass it to `assert_summary` to fail a test.

The Rules API module is accessed at call time via the integration module so
tests can swap it out.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from rulesim.core.batch import make_delete, make_set, make_update
from rulesim.core.cases import AuthLike, make_commit_cases, make_get_case
from rulesim.core.assertions import summarize
from rulesim.core.errors import NotAuthorizedError
from rulesim.core.mocks import build_after_mocks, build_mocks
from rulesim.core.tree import DocumentTree
from rulesim.integrations import google_auth as auth_module
from rulesim.integrations import rules_api as rules_api_module
from rulesim.schemas.batch import BatchOperation
from rulesim.schemas.dataset import Collection, Collections, Credential, Document, DocumentEntry, parse_collections
from rulesim.schemas.testing import FunctionMock, TestCase, TestState, TestSummary

logger = logging.getLogger(__name__)


class Database:
    def __init__(
        self,
        credential: Union[Credential, Mapping[str, Any]],
        data: Optional[Mapping[str, Any]] = None,
        rules: Optional[str] = None,
    ):
        if not isinstance(credential, Credential):
            credential = Credential.model_validate(credential)
        self.credential = credential
        self.collections: Collections = parse_collections(data)
        self.rules: str = rules or ""
        self.client: Optional[auth_module.AuthorizedClient] = None

    # ------------------------------------------------------------------ #
    # Dataset & rules                                                     #
    # ------------------------------------------------------------------ #

    def set_data(self, data: Mapping[str, Any]) -> None:
        """Replace the whole fixture dataset."""
        self.collections = parse_collections(data)

    def set_data_from_file(self, data_file: Union[str, Path]) -> None:
        with open(data_file, encoding="utf-8") as f:
            self.set_data(json.load(f))

    def set_rules(self, rules: str) -> None:
        self.rules = rules

    def set_rules_from_file(self, rules_file: Union[str, Path]) -> None:
        self.set_rules(Path(rules_file).read_text(encoding="utf-8"))

    @property
    def tree(self) -> DocumentTree:
        return DocumentTree(self.collections)

    def get_collection(self, path: str) -> Collection:
        return self.tree.get_collection(path)

    def get_document(self, path: str) -> Optional[Document]:
        return self.tree.get_document(path)

    def has_document(self, path: str) -> bool:
        return self.tree.has_document(path)

    def get_documents(
        self, collections: Optional[Collections] = None, parent_path: str = ""
    ) -> list[DocumentEntry]:
        return self.tree.get_documents(collections, parent_path)

    # ------------------------------------------------------------------ #
    # Authorization & evaluation                                          #
    # ------------------------------------------------------------------ #

    async def authorize(self) -> None:
        """Authorize the API client. A no-op once a client exists."""
        if self.client:
            return

        self.client = await auth_module.authorize(self.credential)

    def _require_client(self) -> auth_module.AuthorizedClient:
        if not self.client:
            raise NotAuthorizedError(
                "API client not authorized yet, call database.authorize() first"
            )
        return self.client

    async def test_rules(self, test_cases: Union[TestCase, Sequence[TestCase]]) -> TestSummary:
        """Evaluate the current rules against `test_cases` in one API call."""
        client = self._require_client()
        if isinstance(test_cases, TestCase):
            test_cases = [test_cases]
        test_cases = list(test_cases)
        rules = self.rules

        access_token = await client.access_token()
        response = await rules_api_module.evaluate(
            client.project_id, access_token, rules, test_cases
        )
        summary = summarize(test_cases, response.test_results)

        if not summary.success:
            failed = sum(1 for t in summary.tests if t.result.state != TestState.SUCCESS)
            logger.info(f"[RULES] {failed}/{len(summary.tests)} case(s) did not meet expectation")
        return summary

    # ------------------------------------------------------------------ #
    # Test-case factories                                                 #
    # ------------------------------------------------------------------ #

    def create_mock_functions(self) -> list[FunctionMock]:
        return build_mocks(self.tree)

    def create_batch_after_function_mocks(self, batch: Sequence[BatchOperation]) -> list[FunctionMock]:
        return build_after_mocks(self.tree, batch)

    def create_get_test(self, allow: bool, auth: AuthLike, path: str) -> TestCase:
        self._require_client()
        return make_get_case(allow, auth, path, self.tree)

    def create_commit_test(
        self, allow: bool, auth: AuthLike, batch: Sequence[BatchOperation]
    ) -> list[TestCase]:
        self._require_client()
        return make_commit_cases(allow, auth, batch, self.tree)

    # ------------------------------------------------------------------ #
    # Assertion helpers                                                   #
    # ------------------------------------------------------------------ #

    async def can_get(self, auth: AuthLike, path: str) -> TestSummary:
        return await self.test_rules([self.create_get_test(True, auth, path)])

    async def cannot_get(self, auth: AuthLike, path: str) -> TestSummary:
        return await self.test_rules([self.create_get_test(False, auth, path)])

    async def can_commit(self, auth: AuthLike, batch: Sequence[BatchOperation]) -> TestSummary:
        return await self.test_rules(self.create_commit_test(True, auth, batch))

    async def cannot_commit(self, auth: AuthLike, batch: Sequence[BatchOperation]) -> TestSummary:
        return await self.test_rules(self.create_commit_test(False, auth, batch))

    async def can_set(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self.can_commit(auth, [make_set(path, data)])

    async def cannot_set(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self.cannot_commit(auth, [make_set(path, data)])

    async def can_update(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self.can_commit(auth, [make_update(path, data)])

    async def cannot_update(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self.cannot_commit(auth, [make_update(path, data)])

    async def can_delete(self, auth: AuthLike, path: str) -> TestSummary:
        return await self.can_commit(auth, [make_delete(path)])

    async def cannot_delete(self, auth: AuthLike, path: str) -> TestSummary:
        return await self.cannot_commit(auth, [make_delete(path)])
