"""
Ask Tool - Output Formatting

Renders an AskOutcome as Markdown (human-readable) or JSON (programmatic).
No logic beyond layout lives here.
"""

from __future__ import annotations

import json

from aura_search.domain.entities import AskOutcome, OutcomeStatus

RETRY_HINT = "Re-run the same query to try the sources again."


def format_outcome_markdown(outcome: AskOutcome) -> str:
    """Markdown view of one outcome (answer, insufficient notice, or failure)."""
    if outcome.status is OutcomeStatus.FAILED:
        return f"⚠️ {outcome.error}\n\n_{RETRY_HINT}_"

    if outcome.status is OutcomeStatus.INSUFFICIENT or outcome.summary is None:
        return f"ℹ️ {outcome.error or 'No information found.'}"

    summary = outcome.summary
    lines = [
        "## Unified Answer",
        "",
        summary.main_answer or "_No summary text available._",
    ]

    if summary.key_points:
        lines += ["", "### Key Points", ""]
        lines += [f"- {point}" for point in summary.key_points]

    if outcome.links:
        lines += ["", "### Sources", ""]
        lines += [f"{i}. [{link.title}]({link.url})" for i, link in enumerate(outcome.links, 1)]

    if summary.sources:
        lines += ["", f"_Compiled from: {', '.join(summary.sources)}_"]

    return "\n".join(lines)


def format_outcome_json(outcome: AskOutcome) -> str:
    return json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2)
