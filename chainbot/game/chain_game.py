"""
Chain Game

The round scheduler of the chain game. Players continue a chain of names:
each answer must start with the end of the current link (or, in reverse
mode, end with its start).

Two modes are supported:
- Free-join: everyone in the chat can answer; the first correct answer
  scores a point and the first player to reach the points goal wins.
- Elimination: players take turns in a shuffled order; failing to answer in
  time eliminates the player, and the last players standing win.

State changes always happen before any announcement is awaited, so a guess
arriving while a message is being sent sees a consistent game.
"""

import random
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set

from .chain_states import (
    ChainMode, ChainOptions, ChainPhase,
    ELIMINATION_WINNER_BITS, FREEJOIN_BITS_PER_POINT,
    FREEJOIN_START_DELAY, NEXT_ROUND_DELAY, SWEEP_INTRO_DELAY,
)
from .errors import ConfigurationError
from .link_sources import LinkSource, get_link_source
from .links import KeyIndex, Link, build_pool, check_playable, to_id
from .players import Player, PlayerRegistry
from .room import GameRoom, TimerCallback, TimerHandle
from .selector import LinkSelector, SelectionResult
from .usage import UsageTracker
from ..utils.logging_config import get_logger, log_game_event

# Setup logger
logger = get_logger(__name__)

EndCallback = Callable[["ChainGame"], Awaitable[None]]


class ChainGame:
    """
    One chain game running in one room.

    The pool, key index, usage tracker and selector are built by
    ``on_signups()`` and live for the whole game.
    """

    def __init__(
        self,
        game_id: str,
        room: GameRoom,
        options: Optional[ChainOptions] = None,
        rng: Optional[random.Random] = None,
        source: Optional[LinkSource] = None,
        on_end: Optional[EndCallback] = None,
        chat_id: Optional[int] = None,
    ):
        self.game_id = game_id
        self.room = room
        self.options = options or ChainOptions.from_settings()
        self.rng = rng or random.Random()
        self.source = source
        self.on_end_callback = on_end
        self.chat_id = chat_id

        self.players = PlayerRegistry(max_players=self.options.max_players)
        self.phase = ChainPhase.SIGNUPS
        self.started = False
        self.ended = False
        self.round = 0  # free-join rounds
        self.sweep = 0
        self.turns = 0  # elimination turns
        self.round_time = self.options.round_time
        self.turn_order: List[Player] = []
        self.current_player: Optional[Player] = None
        self.round_rejections: Set[str] = set()
        self.winners: List[Player] = []
        self.last_selection: Optional[SelectionResult] = None

        self._timeout: Optional[TimerHandle] = None
        self._timeout_token: Optional[object] = None

        # Set in setup()
        self.pool: Dict[str, Link] = {}
        self.index: Optional[KeyIndex] = None
        self.tracker: Optional[UsageTracker] = None
        self.selector: Optional[LinkSelector] = None

    @property
    def freejoin(self) -> bool:
        return self.options.mode == ChainMode.FREEJOIN

    @property
    def links_type(self) -> str:
        return self.source.links_type if self.source else "link"

    @property
    def current_link(self) -> Optional[Link]:
        return self.selector.current_link if self.selector else None

    # ------------------------------------------------------------------
    # Setup and lifecycle
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """
        Build the pool, key index and selector.

        Raises:
            ConfigurationError: If the variant is unknown or the pool cannot
                sustain a game
        """
        options = self.options
        if self.source is None:
            self.source = get_link_source(options.variant)

        self.pool = build_pool(
            self.source.get_links(),
            link_length=options.link_length,
            letter_based=options.letter_based,
            accepts_formes=options.accepts_formes,
            excluded=self.source.excluded,
        )
        self.index = KeyIndex.from_pool(self.pool, options.link_length, options.reverse_links)
        check_playable(self.pool, self.index, options.reverse_links)
        self.tracker = UsageTracker(self.index)
        self.selector = LinkSelector(
            self.pool,
            self.index,
            self.tracker,
            rng=self.rng,
            reverse_links=options.reverse_links,
            links_type=self.source.links_type,
        )
        self._log_event("chain_setup", variant=self.source.name,
                        pool_size=len(self.pool), mode=options.mode.value)

    async def on_signups(self) -> None:
        """Prepare the game; free-join games start on their own shortly after."""
        self.setup()
        self.phase = ChainPhase.SIGNUPS
        if self.freejoin:
            self._set_timeout(FREEJOIN_START_DELAY, self.on_start)

    def add_player(self, player_id: int, name: str) -> Optional[Player]:
        """Sign a player up for an elimination game."""
        if self.started or self.ended or self.freejoin:
            return None
        player = self.players.add(player_id, name)
        if player:
            self._log_event("player_joined", player_id=player_id)
        return player

    async def on_start(self) -> None:
        """
        Start play.

        Raises:
            ConfigurationError: If an elimination game has fewer than 2 players
        """
        if self.started or self.ended:
            return
        if not self.freejoin and self.players.remaining_count() < 2:
            raise ConfigurationError("At least 2 players are needed to start.")
        self._clear_timeout()
        self.started = True
        self._log_event("chain_started", players=len(self.players))
        await self.next_round()

    async def next_round(self) -> None:
        if self.ended:
            return
        if self.freejoin:
            await self._next_freejoin_round()
        else:
            await self._next_turn()

    async def end(self) -> None:
        """End the game normally and announce the winners."""
        if self.ended:
            return
        self._finish()

        if self.freejoin:
            for player in self.players.players.values():
                if player.points:
                    self.players.add_bits(player, player.points * FREEJOIN_BITS_PER_POINT)
        else:
            self.winners = self.players.remaining()
            for player in self.winners:
                self.players.add_bits(player, ELIMINATION_WINNER_BITS)
            await self.room.say(self._winners_text())

        self._log_event("chain_ended", **self._progress(), winners=[player.id for player in self.winners])
        await self._notify_end()

    async def stop(self) -> None:
        """End the game early without winners."""
        if self.ended:
            return
        self._finish()
        self._log_event("chain_stopped", **self._progress())
        await self.room.say("The game was forcibly ended.")
        await self._notify_end()

    def _finish(self) -> None:
        self._clear_timeout()
        self.ended = True
        self.phase = ChainPhase.ENDED
        self.current_player = None
        if self.selector:
            self.selector.clear_targets()

    async def _notify_end(self) -> None:
        if self.on_end_callback:
            await self.on_end_callback(self)

    def _winners_text(self) -> str:
        if not self.winners:
            return "No winners this game!"
        names = ", ".join(player.name for player in self.winners)
        return f"**Congratulations to {names} for winning the game!**"

    def _log_event(self, event_type: str, **kwargs) -> None:
        log_game_event(self.game_id, event_type, chat_id=self.chat_id, **kwargs)

    def _progress(self) -> Dict[str, int]:
        if self.freejoin:
            return {"rounds": self.round}
        return {"sweeps": self.sweep, "turns": self.turns}

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------

    def _set_timeout(self, delay: float, callback: TimerCallback) -> None:
        self._clear_timeout()
        token = object()

        async def fire() -> None:
            # A superseded timer must never advance the game
            if self._timeout_token is not token or self.ended:
                return
            self._timeout = None
            self._timeout_token = None
            await callback()

        self._timeout_token = token
        self._timeout = self.room.schedule(delay, fire)

    def _clear_timeout(self) -> None:
        if self._timeout is not None:
            self._timeout.cancel()
        self._timeout = None
        self._timeout_token = None

    @property
    def has_pending_timer(self) -> bool:
        return self._timeout is not None

    # ------------------------------------------------------------------
    # Free-join rounds
    # ------------------------------------------------------------------

    async def _next_freejoin_round(self) -> None:
        self.round += 1
        # Every free-join round is an independent draw
        self.tracker.reset()
        result = self.selector.select_next()
        self.last_selection = result
        self.round_rejections = set()
        self.phase = ChainPhase.AWAITING_GUESS
        self._set_timeout(self.round_time, self._on_round_timeout)

        self._log_event("chain_round", round=self.round, link=result.link.id,
                        targets=result.target_starts + result.target_ends)
        await self.room.say(f"The {self.options.mascot} spelled out **{result.link.name}**.")

    async def _on_round_timeout(self) -> None:
        self.selector.clear_targets()
        await self.room.say("Time is up!")
        await self.next_round()

    async def _score_freejoin(self, player_id: int, name: str, link: Link) -> bool:
        self._clear_timeout()
        self.selector.clear_targets()
        player = self.players.enroll(player_id, name)
        points = self.players.add_points(player)
        self._log_event("chain_point", player_id=player_id, points=points, link=link.id)

        if points >= self.options.points:
            self.winners = [player]
            await self.room.say(f"**{player.name}** wins the game! A possible answer was __{link.name}__.")
            await self.end()
            return True

        self.phase = ChainPhase.SCORING
        self._set_timeout(NEXT_ROUND_DELAY, self.next_round)
        suffix = "s" if points > 1 else ""
        await self.room.say(
            f"**{player.name}** advances to **{points}** point{suffix}! A possible answer was __{link.name}__."
        )
        return True

    # ------------------------------------------------------------------
    # Elimination turns
    # ------------------------------------------------------------------

    async def _next_turn(self) -> None:
        if self.players.remaining_count() < 2:
            await self.end()
            return

        if not self.turn_order:
            await self._start_sweep()
            return

        player = self.turn_order.pop(0)
        while player.eliminated and self.turn_order:
            player = self.turn_order.pop(0)
        if player.eliminated:
            await self._start_sweep()
            return

        self.turns += 1
        self.current_player = player
        self.phase = ChainPhase.AWAITING_TURN_GUESS
        self._set_timeout(self.round_time, self._on_turn_timeout)
        await self.room.say(
            f"{player.name} you are up! The {self.options.mascot} spelled out **{self.current_link.name}**."
        )

    async def _start_sweep(self) -> None:
        if self.sweep >= self.options.max_sweeps:
            await self.end()
            return

        self.sweep += 1
        self.turn_order = self.players.remaining()
        self.rng.shuffle(self.turn_order)
        if self.sweep > 1 and self.round_time > self.options.min_round_time:
            self.round_time = max(self.options.min_round_time, self.round_time - self.options.round_time_decay)

        # Key usage persists for the whole sweep
        self.tracker.reset()
        result = self.selector.select_next()
        self.last_selection = result
        self.current_player = None
        self.phase = ChainPhase.SWEEP_START
        self._set_timeout(SWEEP_INTRO_DELAY, self.next_round)

        self._log_event("chain_sweep", sweep=self.sweep, link=result.link.id,
                        round_time=self.round_time)
        remaining = self.players.remaining()
        await self.room.say(
            f"**Round {self.sweep}** | Remaining players ({len(remaining)}): {self.players.names(remaining)}"
        )

    async def _on_turn_timeout(self) -> None:
        player = self.current_player
        self.current_player = None
        if player is not None:
            self.players.eliminate(player)
            self._log_event("chain_elimination", player_id=player.id, sweep=self.sweep)
        await self.room.say("Time is up!")
        if player is not None:
            await self.room.say(f"{player.name} was eliminated! You did not guess a {self.links_type} link!")
        await self.next_round()

    async def _continue_chain(self, link: Link) -> bool:
        self._clear_timeout()
        self.current_player = None
        self.phase = ChainPhase.TURN_START
        result = self.selector.select_next(link.id)
        self.last_selection = result
        if result.substituted:
            self._log_event("chain_substitution", rejected=result.rejected, resets=result.resets,
                        link=result.link.id)
            await self.room.say(result.notice)
        await self.next_round()
        return True

    # ------------------------------------------------------------------
    # Guesses
    # ------------------------------------------------------------------

    async def guess(self, player_id: int, name: str, text: str) -> bool:
        """
        Submit a guess.

        Args:
            player_id: Id of the guessing player
            name: Display name, used when a free-join player is enrolled
            text: Raw guess text

        Returns:
            bool: True if the guess continued the chain, False if it was a
            no-op (wrong turn, unknown or used link, no active target)
        """
        if self.ended or not self.started or self.selector is None:
            return False

        if self.freejoin:
            if self.phase != ChainPhase.AWAITING_GUESS or not self.selector.has_targets:
                return False
            player = self.players.get(player_id)
            if player is not None and player.eliminated:
                return False
        else:
            if self.current_player is None or self.current_player.id != player_id:
                return False

        guess_id = to_id(text)
        if not guess_id or guess_id in self.tracker.used_ids:
            return False
        if self.freejoin and guess_id in self.round_rejections:
            return False

        link = self.pool.get(guess_id)
        if link is None:
            if self.freejoin:
                self.round_rejections.add(guess_id)
            else:
                await self.room.say(f"'{guess_id}' is not a valid {self.links_type}.")
            return False

        if not self.selector.matches(link):
            if self.freejoin:
                self.round_rejections.add(guess_id)
            return False

        if self.freejoin:
            return await self._score_freejoin(player_id, name, link)
        return await self._continue_chain(link)

    def get_status(self) -> Dict[str, Any]:
        """Summarize the game for status commands."""
        selector = self.selector
        return {
            "game_id": self.game_id,
            "mode": self.options.mode.value,
            "variant": self.source.name if self.source else self.options.variant,
            "phase": self.phase.value,
            "round": self.round,
            "turns": self.turns,
            "sweep": self.sweep,
            "round_time": self.round_time,
            "current_link": self.current_link.name if self.current_link else None,
            "target_starts": list(selector.target_starts) if selector else [],
            "target_ends": list(selector.target_ends) if selector else [],
            "current_player": self.current_player.name if self.current_player else None,
            "player_count": len(self.players),
            "remaining_players": [player.name for player in self.players.remaining()],
            "points": {player.name: player.points for player in self.players.players.values() if player.points},
        }
