from __future__ import annotations

from typing import Any, Dict, List

import pytest

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.commands.base import SUCCESS, Command, CommandResult
from dynabind.commands.conditional import ConditionalCommand
from dynabind.commands.delegate import DelegateCommand
from dynabind.commands.macro import MacroCommand, MacroCommandResult
from dynabind.commands.set_property import SetPropertyValueCommand
from dynabind.conditions import FALSE, TRUE, PropertyCompare
from dynabind.errors import CommandExecuteError, PropertyNotFoundError
from dynabind.runtime.resolver import PropertyResolver


class _Recorder(Command):
    def __init__(self, log: List[str], name: str, ok: bool = True) -> None:
        self.log = log
        self.name = name
        self.ok = ok

    async def execute(self, registry: ServiceRegistry, context: Any) -> CommandResult:
        self.log.append(self.name)
        return CommandResult(succeeded=self.ok, diagnostic=self.name)


class TestCommandResult:
    def test_success_singleton(self) -> None:
        assert SUCCESS.succeeded is True
        assert SUCCESS.diagnostic == ""

    def test_raise_for_failure(self) -> None:
        assert SUCCESS.raise_for_failure() is SUCCESS
        failed = CommandResult(succeeded=False, diagnostic="boom")
        with pytest.raises(CommandExecuteError) as exc:
            failed.raise_for_failure()
        assert str(exc.value) == "Command failed due to the following error - boom"
        assert exc.value.result is failed

    def test_raise_for_failure_with_prefix(self) -> None:
        with pytest.raises(CommandExecuteError, match="^Sync step - nope$"):
            CommandResult(succeeded=False, diagnostic="nope").raise_for_failure("Sync step")


class TestDelegateCommand:
    @pytest.mark.asyncio
    async def test_no_argument_bool_callable(self, registry: ServiceRegistry) -> None:
        res = await DelegateCommand(lambda: True).execute(registry, {})
        assert res.succeeded is True

    @pytest.mark.asyncio
    async def test_full_callable_returning_result(self, registry: ServiceRegistry) -> None:
        def add(reg: ServiceRegistry, ctx: Any) -> CommandResult:
            v1 = PropertyResolver.get_property_value(ctx, "val1")
            v2 = PropertyResolver.get_property_value(ctx, "val2")
            return CommandResult(succeeded=True, diagnostic=f"Sum of {v1} + {v2} = {v1 + v2}")

        res = await DelegateCommand(add).execute(registry, {"val1": 2, "val2": 5})
        assert res.diagnostic == "Sum of 2 + 5 = 7"

    @pytest.mark.asyncio
    async def test_async_callable_returning_bool(self, registry: ServiceRegistry) -> None:
        async def check(reg: ServiceRegistry, ctx: Any) -> bool:
            return False

        res = await DelegateCommand(check).execute(registry, {})
        assert res.succeeded is False


class TestConditionalCommand:
    @pytest.mark.asyncio
    async def test_no_condition_runs_command(self, registry: ServiceRegistry) -> None:
        ctx: Dict[str, Any] = {}
        cmd = ConditionalCommand(command=SetPropertyValueCommand(property_name="first_name", value="Dude"))
        res = await cmd.execute(registry, ctx)
        assert res.succeeded is True
        assert ctx["first_name"] == "Dude"

    @pytest.mark.asyncio
    async def test_false_condition_skips_command(self, registry: ServiceRegistry) -> None:
        ctx: Dict[str, Any] = {}
        cmd = ConditionalCommand(
            command=SetPropertyValueCommand(property_name="first_name", value="Dude"),
            execute_when=lambda reg, c: False,
        )
        res = await cmd.execute(registry, ctx)
        assert res is SUCCESS
        assert "first_name" not in ctx

    @pytest.mark.asyncio
    async def test_async_condition_reads_context(self, registry: ServiceRegistry) -> None:
        async def enabled(reg: ServiceRegistry, c: Any) -> bool:
            return bool(c["enabled"])

        ctx: Dict[str, Any] = {"enabled": True}
        cmd = ConditionalCommand(command=SetPropertyValueCommand(property_name="x", value=1), execute_when=enabled)
        await cmd.execute(registry, ctx)
        assert ctx["x"] == 1

    @pytest.mark.asyncio
    async def test_property_compare_condition(self, registry: ServiceRegistry) -> None:
        cmd = ConditionalCommand(
            command=SetPropertyValueCommand(property_name="greeting", value="Hello Fred"),
            execute_when=PropertyCompare(property_name="first_name", property_value="Fred"),
        )
        fred: Dict[str, Any] = {"first_name": "Fred"}
        barney: Dict[str, Any] = {"first_name": "Barney"}
        assert (await cmd.execute(registry, fred)).succeeded is True
        assert await cmd.execute(registry, barney) is SUCCESS
        assert fred["greeting"] == "Hello Fred"
        assert "greeting" not in barney

    @pytest.mark.asyncio
    async def test_constant_conditions(self, registry: ServiceRegistry) -> None:
        ctx: Dict[str, Any] = {}
        await ConditionalCommand(SetPropertyValueCommand(property_name="a", value=1), execute_when=FALSE).execute(
            registry, ctx
        )
        await ConditionalCommand(SetPropertyValueCommand(property_name="b", value=2), execute_when=TRUE).execute(
            registry, ctx
        )
        assert ctx == {"b": 2}


class TestMacroCommand:
    @pytest.mark.asyncio
    async def test_all_children_succeed(self, registry: ServiceRegistry) -> None:
        noop = DelegateCommand(lambda: True)
        add = DelegateCommand(lambda reg, ctx: CommandResult(succeeded=True, diagnostic=str(ctx["a"] + ctx["b"])))
        macro = MacroCommand().add(noop).add(add).add(noop).add(add)

        res = await macro.execute(registry, {"a": 2, "b": 5})
        assert isinstance(res, MacroCommandResult)
        assert res.succeeded is True
        assert res.diagnostic == "4 commands executed - 4 successful and 0 failed"
        assert [r.diagnostic for r in res.results] == ["", "7", "", "7"]

    @pytest.mark.asyncio
    async def test_stops_on_first_failure(self, registry: ServiceRegistry) -> None:
        log: List[str] = []
        macro = MacroCommand(commands=[_Recorder(log, "a"), _Recorder(log, "b", ok=False), _Recorder(log, "c")])
        res = await macro.execute(registry, {})
        assert log == ["a", "b"]
        assert res.succeeded is False
        assert res.diagnostic == "2 commands executed - 1 successful and 1 failed"

    @pytest.mark.asyncio
    async def test_continue_on_failure(self, registry: ServiceRegistry) -> None:
        log: List[str] = []
        macro = MacroCommand(
            commands=[_Recorder(log, "a", ok=False), _Recorder(log, "b")],
            stop_on_failure=False,
        )
        res = await macro.execute(registry, {})
        assert log == ["a", "b"]
        assert res.succeeded is False

    @pytest.mark.asyncio
    async def test_children_share_context_in_order(self, registry: ServiceRegistry) -> None:
        ctx: Dict[str, Any] = {}
        macro = MacroCommand(
            commands=[
                SetPropertyValueCommand(property_name="x", value=1),
                DelegateCommand(lambda reg, c: c.setdefault("y", c["x"] + 1) == 2),
            ]
        )
        res = await macro.execute(registry, ctx)
        assert res.succeeded is True
        assert ctx == {"x": 1, "y": 2}

    @pytest.mark.asyncio
    async def test_child_exception_propagates(self, registry: ServiceRegistry) -> None:
        macro = MacroCommand(commands=[DelegateCommand(lambda reg, c: PropertyResolver.get_property_value(c, "nope"))])
        with pytest.raises(PropertyNotFoundError):
            await macro.execute(registry, {})

    @pytest.mark.asyncio
    async def test_empty_macro_succeeds(self, registry: ServiceRegistry) -> None:
        res = await MacroCommand().execute(registry, {})
        assert res.succeeded is True
        assert res.diagnostic == "0 commands executed - 0 successful and 0 failed"
