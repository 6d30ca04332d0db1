"""
Error taxonomy for catalog verification.

- Absent language/branch/model keys are NOT errors: accessors return
  "", 0, None or [] instead.
- InvariantViolation: the snapshot itself is malformed (fixture bug).
- UpstreamError: a remote call answered with an unexpected status or
  failed in transport. Never retried.
- VerificationFailure: UI state disagrees with the API-derived value.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class QAError(Exception):
    """Base class for storefront_qa errors."""


class InvariantViolation(QAError):
    """Raised when a product snapshot breaks a structural invariant."""


class UpstreamError(QAError):
    """Raised when a dependency call does not return the expected status."""

    def __init__(
        self,
        message: str,
        response: Optional[httpx.Response] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.response = response
        self.method = method
        self.url = url
        self.status_code = response.status_code if response is not None else None
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        parts = [message]
        if self.method or self.url:
            parts.append(f"{self.method or ''} {self.url or ''}".strip())
        if self.response is not None:
            parts.append(f"HTTP {self.response.status_code}")
            parts.append(f"body: {self.response.text[:500]}")
        return " | ".join(parts)


class VerificationFailure(AssertionError):
    """
    Assertion failure with a detailed, human-readable message.

    Structure:
    1. Scenario: What was being checked
    2. Expected: API-derived value
    3. Actual: What the UI showed
    4. Likely Cause: Most probable reason
    5. Location: Where in the product the mismatch is (branch, variation, language)
    """

    def __init__(
        self,
        scenario: str,
        expected: str,
        actual: str,
        likely_cause: str = "",
        location: str = "",
        extra_context: Optional[Dict[str, Any]] = None,
    ):
        self.scenario = scenario
        self.expected = expected
        self.actual = actual
        self.likely_cause = likely_cause
        self.location = location
        self.extra_context = extra_context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [
            "",
            "=" * 80,
            "VERIFICATION FAILURE",
            "=" * 80,
            f"SCENARIO: {self.scenario}",
            "-" * 80,
            f"EXPECTED: {self.expected}",
            f"ACTUAL: {self.actual}",
        ]
        if self.likely_cause or self.location:
            lines.append("-" * 80)
        if self.likely_cause:
            lines.append(f"LIKELY CAUSE: {self.likely_cause}")
        if self.location:
            lines.append(f"LOCATION: {self.location}")

        if self.extra_context:
            lines.append("-" * 80)
            lines.append("EXTRA CONTEXT:")
            for key, value in self.extra_context.items():
                lines.append(f"  {key}: {value}")

        lines.append("=" * 80)
        return "\n".join(lines)
