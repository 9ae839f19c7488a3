"""
RulesTestContext: one shared Database for a whole test suite.

Create it in suite setup, authorize it once, then swap rules and data between
groups of tests; dispose of it in teardown:

    ctx = RulesTestContext()
    await ctx.authorize(credential)
    ctx.set_rules_from_file("firestore.rules")
    ctx.set_data(fixture)
    assert_summary(await ctx.can_get({"uid": "alice"}, "users/alice"))
    await ctx.dispose()

Re-authorizing (e.g. with another credential) keeps the current rules and data.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from rulesim.core.cases import AuthLike
from rulesim.core.errors import NotInitializedError
from rulesim.integrations import http_client as http_module
from rulesim.schemas.dataset import Credential
from rulesim.schemas.testing import TestSummary
from rulesim.services.database import Database

logger = logging.getLogger(__name__)


class RulesTestContext:
    def __init__(self):
        self._database: Optional[Database] = None

    async def authorize(self, credential: Union[Credential, Mapping[str, Any]]) -> Database:
        previous = self._database
        database = Database(
            credential=credential,
            rules=previous.rules if previous else "",
        )
        if previous:
            database.collections = previous.collections

        await http_module.initialize()
        await database.authorize()
        self._database = database
        return database

    def _require_database(self, operation: str) -> Database:
        if not self._database:
            raise NotInitializedError(f"Call authorize before calling {operation}")
        return self._database

    @property
    def database(self) -> Database:
        return self._require_database("database")

    def set_data(self, data: Mapping[str, Any]) -> None:
        self._require_database("set_data").set_data(data)

    def set_rules(self, rules: str) -> None:
        self._require_database("set_rules").set_rules(rules)

    def set_rules_from_file(self, rules_file: Union[str, Path]) -> None:
        self._require_database("set_rules_from_file").set_rules_from_file(rules_file)

    async def can_get(self, auth: AuthLike, path: str) -> TestSummary:
        return await self._require_database("can_get").can_get(auth, path)

    async def cannot_get(self, auth: AuthLike, path: str) -> TestSummary:
        return await self._require_database("cannot_get").cannot_get(auth, path)

    async def can_set(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self._require_database("can_set").can_set(auth, path, data)

    async def cannot_set(self, auth: AuthLike, path: str, data: dict) -> TestSummary:
        return await self._require_database("cannot_set").cannot_set(auth, path, data)

    async def dispose(self) -> None:
        await http_module.close()
        self._database = None
