"""
Prompts for turning a finished reasoning trace into the final artifact.

User prompts may use {task}, {goal}, {trace}, {observations} and {key_findings}.
"""

FILMOGRAPHY_TASK = "Generate a filmography for a random actor"
FILMOGRAPHY_GOAL = "Produce a comprehensive, accurate filmography with proper structure"

FILMOGRAPHY_SYSTEM_PROMPT = """You are a filmography expert. Generate a comprehensive filmography
based on the reasoning process and observations.

Structure the output as:
1. Actor Overview
2. Film Categories (e.g., Major Roles, Supporting Roles, Cameos)
3. Timeline Analysis
4. Notable Collaborations
5. Career Highlights

Ensure accuracy and completeness."""

FILMOGRAPHY_USER_PROMPT = """Generate filmography for a random actor based on:

REASONING PROCESS:
{trace}

OBSERVATIONS:
{observations}

KEY FINDINGS:
{key_findings}

FINAL INSTRUCTIONS:
Use all available information. If any gaps remain, acknowledge them.
Add analytical insights where possible."""


ISSUE_OPERATION_TASK = "Plan how to {request} for issue {issue_id}"
ISSUE_OPERATION_GOAL = "Determine the correct operation on issue {issue_id} and its arguments"

ISSUE_OPERATION_SYSTEM_PROMPT = """You propose an issue operation based on the provided reasoning trace.
Use the reasoning trace to determine the correct operation and its details. You do not execute it.
Operations: show/summary, status, comment, assign, transition (close/done/open/in-progress).
Put the comment text, assignee or target status in details, and explain the choice in rationale.
If the request describes an error from another system, the operation is a comment on the issue describing the error."""

ISSUE_OPERATION_USER_PROMPT = """Propose the issue operation based on the reasoning trace.

Task: {task}

Reasoning trace:
{trace}

Observations: {observations}

Produce the proposed operation for the issue."""


GENERIC_SYSTEM_PROMPT = """You produce the final answer for a reasoning session.
Use the reasoning trace, observations and key findings. Acknowledge any gaps that remain."""

GENERIC_USER_PROMPT = """Task: {task}
Goal: {goal}

REASONING PROCESS:
{trace}

OBSERVATIONS:
{observations}

KEY FINDINGS:
{key_findings}

Produce the final answer."""


STRUCTURED_OUTPUT_INSTRUCTIONS = """

Return the FINAL answer strictly as a JSON object matching this JSON schema:
{schema}

Return only the object. No markdown. No extra text."""
