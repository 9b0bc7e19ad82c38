# processdesk/testing/uat_service.py

from typing import Any, Dict, Iterable

from processdesk.schemas.test_case_schema import TestCaseRead

TRACKED_STATUSES = ("Passed", "Failed", "Pending", "Blocked")


def summarize_test_cases(test_cases: Iterable[TestCaseRead]) -> Dict[str, Any]:
    """UAT progress for one project: status counts, completion rate and open defects."""
    cases = list(test_cases)
    counts = {status: 0 for status in TRACKED_STATUSES}
    defects = []

    for tc in cases:
        if tc.status in counts:
            counts[tc.status] += 1
        if tc.status == "Failed" and tc.issue:
            defects.append(
                {
                    "testCase": tc.code,
                    "title": tc.title,
                    "issue": tc.issue,
                    "tester": tc.tester,
                }
            )

    total = len(cases)
    completion_rate = round(counts["Passed"] / total * 100) if total else 0
    approved = counts["Failed"] == 0 and counts["Blocked"] == 0

    return {
        "total": total,
        "passed": counts["Passed"],
        "failed": counts["Failed"],
        "pending": counts["Pending"],
        "blocked": counts["Blocked"],
        "completionRate": completion_rate,
        "overallStatus": "APPROVED" if approved else "PENDING",
        "defects": defects,
    }
