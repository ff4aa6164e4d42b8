# application/services/result_formatter.py
from __future__ import annotations

from domain.results import TestResult

PASSED_LINE = "✅ Test passed"
FAILED_LINE = "❌ Test failed"
LOG_HEADER = "--- Logs ---"


def format_test_result(result: TestResult) -> str:
    out = ""

    if result.success:
        out += f"{PASSED_LINE}\n"
    else:
        out += f"{FAILED_LINE}\n"
        if result.error:
            out += f"Error: {result.error}\n"

    out += f"Duration: {result.duration}ms\n\n"

    out += f"{LOG_HEADER}\n"
    out += "\n".join(result.logs)

    return out
