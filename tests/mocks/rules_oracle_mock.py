"""
FakeRulesOracle: in-memory stand-in for the Rules API `projects.test` call.

Instead of parsing rules it applies Python policies keyed by top-level
collection, mirroring tests/fixtures/firestore.rules. Policies see the wire
payload exactly as it would be sent (`TestCase.to_wire()`), and `get()`,
`exists()` and `getAfter()` resolve through the function mocks the way the
API does: first exact argument match, then the `anyValue` fallback.
"""

from rulesim.config import settings
from rulesim.core.errors import RulesCompilationError
from rulesim.schemas.testing import TestRulesetResponse


class MockNotFound(Exception):
    """No function mock matched; the API reports this as an evaluation error."""


class RuleContext:
    def __init__(self, wire_case: dict):
        self.case = wire_case
        self.request = wire_case["request"]
        self.auth = self.request.get("auth") or {}
        self.method = self.request["method"]
        self.path = self.request["path"][len(settings.database_documents_prefix):]
        self.segments = self.path.split("/")
        self.resource_data = (wire_case.get("resource") or {}).get("data")
        self.function_mocks = wire_case.get("functionMocks", [])
        self.calls: list[tuple[str, str]] = []

    @property
    def uid(self):
        return self.auth.get("uid")

    def call(self, function: str, path: str):
        absolute = f"{settings.database_documents_prefix}{path}"
        self.calls.append((function, absolute))

        candidates = [m for m in self.function_mocks if m["function"] == function]
        for mock in candidates:
            arg = mock["args"][0]
            if "exact_value" in arg and arg["exact_value"] == absolute:
                return mock["result"]["value"]
        for mock in candidates:
            if "anyValue" in mock["args"][0]:
                return mock["result"]["value"]
        raise MockNotFound(f"{function}({absolute})")

    def get(self, path: str):
        return self.call("get", path)

    def exists(self, path: str):
        return self.call("exists", path)

    def get_after(self, path: str):
        return self.call("getAfter", path)


def users_policy(ctx: RuleContext) -> bool:
    user_id = ctx.segments[1]
    if len(ctx.segments) == 2:
        if ctx.method == "get":
            return bool((ctx.resource_data or {}).get("public")) or ctx.uid == user_id
        return ctx.uid == user_id

    if ctx.segments[2] == "favorites" and ctx.method == "get":
        user = ctx.get(f"users/{user_id}")
        return bool(user and user["data"].get("public"))
    return False


def settings_policy(ctx: RuleContext) -> bool:
    user_id = ctx.segments[1]
    if ctx.method not in ("create", "update"):
        return False
    return ctx.uid == user_id and ctx.get_after(f"users/{user_id}") is not None


DEFAULT_POLICIES = {
    "users": users_policy,
    "settings": settings_policy,
}


class FakeRulesOracle:
    def __init__(self, policies: dict | None = None):
        self.policies = dict(DEFAULT_POLICIES if policies is None else policies)
        self.issues: list[dict] = []
        self.debug_messages: list[str] = []
        self.requests: list[dict] = []
        self.contexts: list[RuleContext] = []

    def allowed(self, ctx: RuleContext) -> bool:
        policy = self.policies.get(ctx.segments[0])
        if policy is None:
            return False
        try:
            return policy(ctx)
        except MockNotFound:
            return False

    async def evaluate(self, project_id, access_token, rules_source, test_cases):
        wire_cases = [case.to_wire() for case in test_cases]
        self.requests.append(
            {
                "project_id": project_id,
                "access_token": access_token,
                "rules": rules_source,
                "cases": wire_cases,
            }
        )

        if self.issues:
            raise RulesCompilationError(TestRulesetResponse.model_validate({"issues": self.issues}).issues)

        results = []
        for wire_case in wire_cases:
            ctx = RuleContext(wire_case)
            self.contexts.append(ctx)
            verdict = "ALLOW" if self.allowed(ctx) else "DENY"
            result = {"state": "SUCCESS" if verdict == wire_case["expectation"] else "FAILURE"}
            if result["state"] == "FAILURE" and self.debug_messages:
                result["debugMessages"] = list(self.debug_messages)
            results.append(result)

        return TestRulesetResponse.model_validate({"testResults": results})
