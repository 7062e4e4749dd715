"""Test doubles and builders shared by the chain tests."""

import random
from typing import List, Optional, Sequence

from chainbot.game.chain_game import ChainGame
from chainbot.game.chain_states import ChainMode, ChainOptions
from chainbot.game.link_sources import LinkSource
from chainbot.game.links import KeyIndex, Link, build_pool
from chainbot.game.room import GameRoom, TimerCallback, TimerHandle
from chainbot.game.selector import LinkSelector
from chainbot.game.usage import UsageTracker


# ---- Utilities ------------------------------------------------

class FakeTimer(TimerHandle):
    def __init__(self, delay: float, callback: TimerCallback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeRoom(GameRoom):
    """Records announcements; timers only run when a test fires them."""

    def __init__(self):
        self.messages: List[str] = []
        self.timers: List[FakeTimer] = []

    async def say(self, text: str) -> None:
        self.messages.append(text)

    def schedule(self, delay: float, callback: TimerCallback) -> TimerHandle:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    async def fire(self) -> FakeTimer:
        """Run the most recently scheduled pending timer."""
        timer = self.pending[-1]
        timer.fired = True
        await timer.callback()
        return timer


class ScriptedRandom(random.Random):
    """Returns scripted choices first, then falls back to a seeded draw. Shuffle keeps order."""

    def __init__(self, choices: Optional[Sequence[str]] = None, seed: int = 1234):
        super().__init__(seed)
        self.script = list(choices or [])

    def choice(self, seq):
        if self.script:
            value = self.script.pop(0)
            assert value in seq, f"scripted choice {value!r} not available"
            return value
        return super().choice(seq)

    def shuffle(self, x, *args, **kwargs):
        return None


def make_source(*names: str, links_type: str = "word") -> LinkSource:
    return LinkSource(name="words", links_type=links_type, names=tuple(names))


def make_selector(names, choices=None, reverse_links=False, link_length=1):
    pool = build_pool([Link.from_name(n) for n in names], link_length=link_length)
    index = KeyIndex.from_pool(pool, link_length, reverse_links)
    tracker = UsageTracker(index)
    selector = LinkSelector(pool, index, tracker, rng=ScriptedRandom(choices),
                            reverse_links=reverse_links, links_type="word")
    return selector


def make_game(names, choices=None, mode=ChainMode.ELIMINATION, **option_overrides):
    room = FakeRoom()
    options = ChainOptions(mode=mode, variant="words", **option_overrides)
    game = ChainGame("test-game", room, options=options, rng=ScriptedRandom(choices),
                     source=make_source(*names))
    return game, room


