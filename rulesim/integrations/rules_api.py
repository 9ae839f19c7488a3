"""
Firebase Rules API: `projects.test`.

Evaluates a rules source against a list of test cases and returns one result
per case, in order. Compilation issues in the source are fatal and surface as
`RulesCompilationError`; any other failure surfaces as `OracleError` (or the
underlying aiohttp error for transport problems).
"""

import logging
from typing import Sequence

import aiohttp
from pydantic import ValidationError

from rulesim.config import settings
from rulesim.core.errors import OracleError, RulesCompilationError
from rulesim.integrations import http_client as http_module
from rulesim.schemas.testing import TestCase, TestRulesetResponse

logger = logging.getLogger(__name__)


def build_request(rules_source: str, test_cases: Sequence[TestCase]) -> dict:
    return {
        "source": {
            "files": [
                {"name": settings.rules_file_name, "content": rules_source},
            ]
        },
        "testSuite": {
            "testCases": [case.to_wire() for case in test_cases],
        },
    }


async def evaluate(
    project_id: str,
    access_token: str,
    rules_source: str,
    test_cases: Sequence[TestCase],
) -> TestRulesetResponse:
    url = f"{settings.rules_api_base_url}/projects/{project_id}:test"
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Content-Type": "application/json",
    }
    payload = build_request(rules_source, test_cases)

    logger.debug(f"[RULES] Testing {len(test_cases)} case(s) against project {project_id}")

    async with http_module.request_session() as sess:
        async with sess.post(url, json=payload, headers=headers) as response:
            if response.status != 200:
                error_text = await response.text()
                logger.error(f"[RULES] Rules API error: {response.status} - {error_text}")
                raise OracleError(
                    f"Rules API error {response.status}: {error_text}", status=response.status
                )
            try:
                body = await response.json()
            except (aiohttp.ContentTypeError, ValueError) as e:
                logger.error(f"[RULES] Unreadable Rules API response: {e}")
                raise OracleError(f"Unreadable Rules API response: {e}") from e

    try:
        result = TestRulesetResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"[RULES] Unexpected Rules API response shape: {e}")
        raise OracleError(f"Unexpected Rules API response: {e}") from e

    if result.issues:
        logger.warning(f"[RULES] Rules source has {len(result.issues)} issue(s)")
        raise RulesCompilationError(result.issues)

    return result
