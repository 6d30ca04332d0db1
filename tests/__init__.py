# Storefront QA Test Suite
#
# This package contains:
# - Unit tests for the catalog, pricing, reconciliation and fixture logic (pytest)
# - API tests against an in-process stub backend (pytest + httpx + Flask)
# - UI E2E tests against a live storefront (Playwright)
# - Stress/load tests for the paginated listings (Locust)
#
# Run with: python -m tests.run [unit|api|ui|stress|all]
