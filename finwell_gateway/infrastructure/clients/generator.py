"""Profile generator HTTP client for fetching sample financial profiles"""

import json
import re
import httpx
from typing import Any, Dict
from finwell_gateway.domain.exceptions import ProfileGenerationError
from finwell_gateway.config import settings
from finwell_gateway.infrastructure.observability.metrics import generation_latency_histogram

PROFILE_PROMPT = """Generate a realistic dummy financial profile.

The profile must include:
- name and age
- 2-3 financial goals (e.g. Emergency Fund, Buy a House)
- income: salary, freelance, and/or consulting
- fixed and variable expenses
- debts with monthly payments
- transaction aggregates by category for a recent month
- 3-4 recurring merchants (Netflix, Spotify, Gym, etc.)
- 2-3 upcoming pay dates
- session_context: {}

Respond ONLY with a valid JSON object matching this shape:

{
  "name": "Jane Doe",
  "age": 32,
  "goals": [{"name": "...", "amount": 0}],
  "income": {"salary": 0, "freelance": 0, "consulting": 0},
  "expenses": {"fixed": [{"name": "...", "amount": 0}], "variable": [{"name": "...", "amount": 0}]},
  "debts": [{"name": "...", "interest_rate": 0, "monthly_payment": 0}],
  "transaction_aggregates": [{"category": "...", "total_amount": 0, "month": "October"}],
  "recurring_merchants": [{"name": "...", "amount": 0, "frequency": "monthly"}],
  "pay_dates": [{"date": "YYYY-MM-DD", "category": "Salary"}],
  "session_context": {}
}

Return only the JSON. No extra explanation or markdown."""

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the generator added one"""
    return _CODE_FENCE.sub("", text.strip()).strip()


class ProfileGeneratorClient:
    """Client for the external text generator that produces sample profiles"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.generator_api_base
        self.timeout = timeout or settings.http_timeout_seconds

    async def generate_profile(self) -> Dict[str, Any]:
        """
        Request one generated profile document.

        Raises:
            ProfileGenerationError: On timeout, HTTP errors, non-text content, or invalid JSON
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                with generation_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/generate",
                        json={"prompt": PROFILE_PROMPT, "max_tokens": 2048},
                    )
                response.raise_for_status()
                content = response.json().get("content", {})

                if content.get("type") != "text":
                    raise ProfileGenerationError("Generator returned non-text content")

                document = json.loads(strip_code_fences(content["text"]))
                if not isinstance(document, dict):
                    raise ProfileGenerationError("Generated profile is not a JSON object")
                return document

            except httpx.TimeoutException as e:
                raise ProfileGenerationError(f"Generator timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ProfileGenerationError(f"Generator error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise ProfileGenerationError(f"Generator unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise ProfileGenerationError(f"Invalid generated profile: {e}") from e
