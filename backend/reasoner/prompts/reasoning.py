"""
Prompts for the iterative reasoning loop.

Each cycle the model receives the step template plus a snapshot of the session
context and must answer with exactly one JSON reasoning step.
"""

REASONING_STEP_SYSTEM_PROMPT = """You are an expert reasoning agent. Analyze the task and provide structured reasoning.

Respond STRICTLY in this JSON format:
{{
  "thought": "Your analytical thought process (at least {min_words} words)",
  "action_needed": true/false,
  "confidence": 0.0-1.0,
  "done": true/false,
  "action_request": {{"name": "<tool name>", "arguments": {{...}}}} or null,
  "key_findings": ["finding1", "finding2"]
}}

Guidelines:
1. Break down complex problems into smaller questions
2. Assess confidence in your reasoning
3. Identify what information is missing
4. Request an action only when a tool can provide missing information
5. Document key findings at each step
6. Never repeat a previous thought - build on it
7. Set done=true only when ready to produce the final output

Return ONLY valid JSON."""


THOUGHT_STEP_SYSTEM_PROMPT = """You are iteratively reasoning before executing a task.

Requirements:
1. Each thought must be substantial (at least {min_words} words)
2. Progress logically from previous thoughts
3. When ready to execute, set done=true

Reply ONLY as JSON: {{"thought": "<next-thought>", "done": true|false}}"""


REASONING_CONTEXT_PROMPT = """## CURRENT CONTEXT

Task: {task}
Goal: {goal}
Previous Steps: {step_count}
Previous Thought: {previous_thought}
Key Findings So Far: {key_findings}
Remaining Questions: {unresolved_questions}
Feedback: {feedback}
Latest Reflection: {reflection}

{available_actions}

Generate next reasoning step focusing on: {focus_area}"""


REASONING_USER_PROMPT = "Continue reasoning towards the goal."


REFLECTION_SYSTEM_PROMPT = """Reflect on the reasoning progress so far. Identify:
1. What has been accomplished
2. What remains unclear
3. Potential blind spots
4. Suggestions for more effective reasoning

Be concise and actionable."""


REFLECTION_USER_PROMPT = """Reasoning steps taken: {thoughts}
Current findings: {key_findings}
Unresolved questions: {unresolved_questions}"""


REVIEW_SYSTEM_PROMPT = """You are reviewing the prior reasoning steps for completeness and coherence.
Identify any gaps or weaknesses and suggest improvements.
Reply ONLY with your review thought."""


REVIEW_USER_PROMPT = """Reasoning trace: {trace}

Provide your review thought to improve the reasoning."""
