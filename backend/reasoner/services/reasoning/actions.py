"""
Actions - external side-effecting calls requested by reasoning steps.

Each tool has:
- name: Unique identifier
- description: What the tool does (shown to LLM)
- parameters: JSON schema for inputs
- execute: Async function to run the tool

Requests arrive as opaque payloads of the form {"name": ..., "arguments": {...}}.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol

from reasoner.errors import ExternalServiceFailure
from reasoner.services.reasoning.context import ReasoningContext

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Result of executing a tool."""
    success: bool
    output: str
    data: Any = None  # Structured data for internal use

    def __str__(self) -> str:
        status = "ok" if self.success else "failed"
        return f"[{status}] {self.output}"


@dataclass
class Tool:
    """Definition of an invocable action."""
    name: str
    description: str
    parameters: dict  # JSON Schema
    execute: Callable[[dict], Awaitable[ToolResult]]


class ActionInvoker(Protocol):
    """Collaborator that performs an action and returns an observation."""

    async def invoke(self, request: Any) -> Any: ...

    def describe(self) -> str: ...


# =============================================================================
# TOOL IMPLEMENTATIONS
# =============================================================================


async def generic_tool(params: dict) -> ToolResult:
    """Echo the input back. Useful to check that actions are wired."""
    value = params.get("input", "")
    if not value:
        return ToolResult(success=False, output="Error: 'input' parameter is required")
    return ToolResult(success=True, output=f"Processed input: {value}")


DEFAULT_TOOLS = [
    Tool(
        name="generic_tool",
        description="A generic tool for demonstration purposes",
        parameters={
            "type": "object",
            "properties": {
                "input": {"type": "string", "description": "Input parameter"}
            },
            "required": ["input"]
        },
        execute=generic_tool
    ),
]


class ToolRegistry:
    """ActionInvoker over a fixed set of named tools."""

    def __init__(self, tools: list[Tool] | None = None):
        self.tools = list(DEFAULT_TOOLS if tools is None else tools)

    def register(self, tool: Tool) -> None:
        if self.get_tool_by_name(tool.name):
            raise ValueError(f"Tool already registered: {tool.name}")
        self.tools.append(tool)

    def get_tool_by_name(self, name: str) -> Tool | None:
        """Find a tool by name."""
        for tool in self.tools:
            if tool.name == name:
                return tool
        return None

    async def invoke(self, request: Any) -> ToolResult:
        if not isinstance(request, dict):
            return ToolResult(success=False, output=f"Malformed action request: {request!r}")

        name = request.get("name", "")
        arguments = request.get("arguments") or {}
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments)
            except json.JSONDecodeError:
                arguments = {"raw": arguments}

        tool = self.get_tool_by_name(name)
        if tool is None:
            logger.warning(f"[Reasoning] Unknown tool: {name}")
            return ToolResult(success=False, output=f"Unknown tool: {name}")

        try:
            return await tool.execute(arguments)
        except Exception as e:
            logger.error(f"[Reasoning] Tool error in {name}: {e}")
            raise ExternalServiceFailure(f"Tool '{name}' failed: {e}") from e

    def describe(self) -> str:
        """Format tools for inclusion in a text prompt."""
        if not self.tools:
            return "Available tools: none"

        lines = ["Available tools:"]
        for tool in self.tools:
            params = tool.parameters.get("properties", {})
            param_strs = []
            for name, schema in params.items():
                param_type = schema.get("type", "any")
                desc = schema.get("description", "")
                required = name in tool.parameters.get("required", [])
                req_str = " (required)" if required else ""
                param_strs.append(f"  - {name}: {param_type}{req_str} - {desc}")

            lines.append(f"\n{tool.name}: {tool.description}")
            if param_strs:
                lines.extend(param_strs)

        return "\n".join(lines)


class ActionDispatcher:
    """Runs at most one requested action per iteration and records its observation."""

    def __init__(self, invoker: ActionInvoker):
        self.invoker = invoker

    def available_actions(self) -> str:
        return self.invoker.describe()

    async def dispatch(self, request: Any, context: ReasoningContext) -> Any:
        logger.info(f"[Reasoning] Action: {json.dumps(request, default=str)[:100]}")
        try:
            observation = await self.invoker.invoke(request)
        except ExternalServiceFailure:
            raise
        except Exception as e:
            raise ExternalServiceFailure(f"Action failed: {e}") from e
        context.add_observation(observation)
        logger.debug(f"[Reasoning] Observation: {str(observation)[:200]}")
        return observation
