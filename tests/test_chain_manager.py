import asyncio
import types

import pytest

from chainbot.game.chain_manager import ChainManager, TelegramRoom
from chainbot.game.chain_states import ChainMode
from chainbot.game.errors import ConfigurationError

from tests.helpers import FakeRoom, ScriptedRandom

CHAT_ID = -12345


class _MockBot:
    """Collects outbound messages instead of hitting Telegram."""
    def __init__(self):
        self.sent = []

    async def send_message(self, chat_id, text, **kwargs):
        self.sent.append((chat_id, text, kwargs))


class _BrokenBot:
    async def send_message(self, chat_id, text, **kwargs):
        raise RuntimeError("network down")


@pytest.mark.asyncio
async def test_create_game_applies_command_options():
    mgr = ChainManager(rng=ScriptedRandom())
    game = await mgr.create_game(CHAT_ID, 1, ["freejoin", "items", "points=3"], room=FakeRoom())

    assert game.options.mode == ChainMode.FREEJOIN
    assert game.options.points == 3
    assert game.links_type == "item"
    assert mgr.get_game(CHAT_ID) is game
    assert mgr.get_creator(CHAT_ID) == 1


@pytest.mark.asyncio
async def test_create_game_rejects_bad_options_and_duplicates():
    mgr = ChainManager(rng=ScriptedRandom())
    with pytest.raises(ConfigurationError):
        await mgr.create_game(CHAT_ID, 1, ["berries"], room=FakeRoom())
    assert mgr.get_game(CHAT_ID) is None

    await mgr.create_game(CHAT_ID, 1, [], room=FakeRoom())
    with pytest.raises(ConfigurationError):
        await mgr.create_game(CHAT_ID, 2, [], room=FakeRoom())


@pytest.mark.asyncio
async def test_elimination_signups_and_start():
    mgr = ChainManager(rng=ScriptedRandom())
    room = FakeRoom()
    await mgr.create_game(CHAT_ID, 1, ["elimination"], room=room)

    ok, _ = mgr.join_game(CHAT_ID, 1, "Ann")
    assert ok
    ok, message = mgr.join_game(CHAT_ID, 1, "Ann")
    assert not ok and "already" in message

    ok, message = await mgr.start_game(CHAT_ID)
    assert not ok and "2 players" in message

    mgr.join_game(CHAT_ID, 2, "Bob")
    ok, _ = await mgr.start_game(CHAT_ID)
    assert ok
    assert room.messages[-1].startswith("**Round 1**")

    ok, message = mgr.join_game(CHAT_ID, 3, "Cid")
    assert not ok and "started" in message


@pytest.mark.asyncio
async def test_freejoin_game_cannot_be_joined():
    mgr = ChainManager(rng=ScriptedRandom())
    await mgr.create_game(CHAT_ID, 1, ["freejoin"], room=FakeRoom())

    ok, message = mgr.join_game(CHAT_ID, 2, "Bob")
    assert not ok and "free-join" in message


@pytest.mark.asyncio
async def test_finished_game_is_removed():
    mgr = ChainManager(rng=ScriptedRandom())
    room = FakeRoom()
    game = await mgr.create_game(CHAT_ID, 1, ["freejoin", "points=1"], room=room)
    await room.fire()

    link = game.current_link
    answer = next(
        candidate for candidate in game.pool.values()
        if candidate.id != link.id and game.selector.matches(candidate)
    )
    assert await mgr.submit_guess(CHAT_ID, 2, "Bob", answer.name) is True

    assert game.ended
    assert mgr.get_game(CHAT_ID) is None
    assert await mgr.submit_guess(CHAT_ID, 2, "Bob", answer.name) is False


@pytest.mark.asyncio
async def test_stop_game():
    mgr = ChainManager(rng=ScriptedRandom())
    room = FakeRoom()
    await mgr.create_game(CHAT_ID, 1, [], room=room)

    assert await mgr.stop_game(CHAT_ID) is True
    assert room.messages[-1] == "The game was forcibly ended."
    assert mgr.get_game_status(CHAT_ID) is None
    assert await mgr.stop_game(CHAT_ID) is False


@pytest.mark.asyncio
async def test_game_rooms_use_the_bot_context():
    mgr = ChainManager(rng=ScriptedRandom())
    mock_bot = _MockBot()
    mgr.set_bot_context(types.SimpleNamespace(bot=mock_bot))

    game = await mgr.create_game(CHAT_ID, 1, [])
    await game.room.say("hello")

    assert isinstance(game.room, TelegramRoom)
    assert mock_bot.sent == [(CHAT_ID, "hello", {"parse_mode": "Markdown"})]
    await mgr.stop_game(CHAT_ID)


@pytest.mark.asyncio
async def test_telegram_room_survives_send_failures():
    room = TelegramRoom(_BrokenBot(), CHAT_ID)
    await room.say("hello")


@pytest.mark.asyncio
async def test_telegram_room_timers_run_and_cancel():
    room = TelegramRoom(_MockBot(), CHAT_ID)
    calls = []

    async def callback():
        calls.append("fired")

    room.schedule(0.01, callback)
    cancelled = room.schedule(0.01, callback)
    cancelled.cancel()
    await asyncio.sleep(0.05)

    assert calls == ["fired"]
    assert cancelled.cancelled
