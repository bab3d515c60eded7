"""Tests for the tool registry and action dispatcher."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from reasoner.errors import ExternalServiceFailure
from reasoner.services.reasoning.actions import ActionDispatcher, Tool, ToolRegistry, ToolResult
from reasoner.services.reasoning.context import ReasoningContext


def _context() -> ReasoningContext:
    return ReasoningContext(task="t", goal="g")


async def _boom(params: dict) -> ToolResult:
    raise RuntimeError("backend down")


class TestToolRegistry:
    @pytest.mark.asyncio
    async def test_generic_tool(self) -> None:
        result = await ToolRegistry().invoke({"name": "generic_tool", "arguments": {"input": "hello"}})

        assert result.success
        assert result.output == "Processed input: hello"

    @pytest.mark.asyncio
    async def test_arguments_as_json_string(self) -> None:
        result = await ToolRegistry().invoke({"name": "generic_tool", "arguments": '{"input": "hi"}'})

        assert result.output == "Processed input: hi"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_an_observation(self) -> None:
        result = await ToolRegistry().invoke({"name": "nope", "arguments": {}})

        assert not result.success
        assert "Unknown tool: nope" in result.output

    @pytest.mark.asyncio
    async def test_malformed_request(self) -> None:
        result = await ToolRegistry().invoke("not a dict")

        assert not result.success

    @pytest.mark.asyncio
    async def test_tool_exception_becomes_service_failure(self) -> None:
        registry = ToolRegistry([Tool(name="boom", description="fails", parameters={}, execute=_boom)])

        with pytest.raises(ExternalServiceFailure):
            await registry.invoke({"name": "boom"})

    def test_register_rejects_duplicates(self) -> None:
        registry = ToolRegistry()

        with pytest.raises(ValueError):
            registry.register(registry.tools[0])

    def test_describe_lists_parameters(self) -> None:
        description = ToolRegistry().describe()

        assert description.startswith("Available tools:")
        assert "generic_tool: A generic tool for demonstration purposes" in description
        assert "  - input: string (required) - Input parameter" in description

    def test_describe_empty(self) -> None:
        assert ToolRegistry([]).describe() == "Available tools: none"


class TestActionDispatcher:
    @pytest.mark.asyncio
    async def test_observation_appended_to_context(self) -> None:
        context = _context()
        dispatcher = ActionDispatcher(ToolRegistry())

        observation = await dispatcher.dispatch({"name": "generic_tool", "arguments": {"input": "x"}}, context)

        assert context.observations == [observation]
        assert str(observation) == "[ok] Processed input: x"

    @pytest.mark.asyncio
    async def test_opaque_invoker(self) -> None:
        invoker = MagicMock()
        invoker.invoke = AsyncMock(return_value={"content": [{"type": "text", "text": "42"}]})
        context = _context()

        await ActionDispatcher(invoker).dispatch({"anything": 1}, context)

        invoker.invoke.assert_called_once_with({"anything": 1})
        assert context.observations == [{"content": [{"type": "text", "text": "42"}]}]

    @pytest.mark.asyncio
    async def test_invoker_errors_are_wrapped(self) -> None:
        invoker = MagicMock()
        invoker.invoke = AsyncMock(side_effect=ConnectionError("refused"))
        context = _context()

        with pytest.raises(ExternalServiceFailure):
            await ActionDispatcher(invoker).dispatch({}, context)

        assert context.observations == []
