from __future__ import annotations

import asyncio

import pytest

from vaultexport.services.commands import Command, CommandRegistry


def test_check_callback_receives_checking_flag():
    seen = []

    def cb(checking: bool) -> bool:
        seen.append(checking)
        return True

    cmd = Command("x", "X", cb)
    assert cmd.is_enabled() is True
    assert cmd.execute() is True
    assert seen == [True, False]


def test_registry_get_all_clear():
    reg = CommandRegistry()
    reg.add_command(Command("a", "A", lambda checking: True))
    reg.add_command(Command("b", "B", lambda checking: False))

    assert [c.id for c in reg.all()] == ["a", "b"]
    assert reg.get("b").is_enabled() is False
    reg.clear()
    assert reg.all() == []
    with pytest.raises(KeyError):
        reg.get("a")


@pytest.mark.asyncio
async def test_spawn_returns_immediately_and_drain_waits():
    reg = CommandRegistry()
    done = []

    async def work():
        await asyncio.sleep(0.01)
        done.append(True)

    reg.spawn(work())
    assert done == []
    await reg.drain()
    assert done == [True]


@pytest.mark.asyncio
async def test_drain_reraises_failures():
    reg = CommandRegistry()

    async def boom():
        raise RuntimeError("broken")

    reg.spawn(boom())
    with pytest.raises(RuntimeError, match="broken"):
        await reg.drain()
