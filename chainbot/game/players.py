"""
Player Registry

Tracks the players of one game: who joined, who is eliminated, their points
and the bits they earned.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class Player:
    """A participant in a chain game."""
    id: int
    name: str
    eliminated: bool = False
    points: int = 0
    bits: int = 0


class PlayerRegistry:
    """Players of a single game, in join order."""

    def __init__(self, max_players: int = 20):
        self.max_players = max_players
        self.players: Dict[int, Player] = {}

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player_id: int) -> bool:
        return player_id in self.players

    def get(self, player_id: int) -> Optional[Player]:
        return self.players.get(player_id)

    def add(self, player_id: int, name: str) -> Optional[Player]:
        """
        Add a player.

        Returns:
            Optional[Player]: The new player, or None if already joined or full
        """
        if player_id in self.players or len(self.players) >= self.max_players:
            return None
        player = Player(id=player_id, name=name)
        self.players[player_id] = player
        return player

    def enroll(self, player_id: int, name: str) -> Player:
        """Return the player, adding them on their first action."""
        player = self.players.get(player_id)
        if player is None:
            player = Player(id=player_id, name=name)
            self.players[player_id] = player
        return player

    def eliminate(self, player: Player) -> None:
        player.eliminated = True

    def add_points(self, player: Player, points: int = 1) -> int:
        player.points += points
        return player.points

    def add_bits(self, player: Player, bits: int) -> None:
        player.bits += bits

    def remaining(self) -> List[Player]:
        """Players that have not been eliminated."""
        return [player for player in self.players.values() if not player.eliminated]

    def remaining_count(self) -> int:
        return len(self.remaining())

    def names(self, players: Optional[List[Player]] = None) -> str:
        players = self.remaining() if players is None else players
        return ", ".join(player.name for player in players)
