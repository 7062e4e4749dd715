"""
Link Selector

Picks the next link of the chain. A link is only placed into play when at
least one of its continuation keys is still usable in the current cycle; when
no such link is available the cycle is reset and a random link is used
instead.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .links import KeyIndex, Link, to_id
from .usage import UsageTracker
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def join_list(items: List[str]) -> str:
    """Join items for a chat message: 'A', 'A and B', 'A, B, and C'."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + ", and " + items[-1]


@dataclass
class SelectionResult:
    """Outcome of one select_next() call."""
    link: Link
    target_starts: List[str]
    target_ends: List[str]
    substituted: bool = False
    notice: Optional[str] = None
    resets: int = 0
    rejected: List[str] = field(default_factory=list)


class LinkSelector:
    """
    Chooses chain links for a game.

    Holds the current link and the target keys a guess has to match.
    """

    def __init__(
        self,
        pool: Dict[str, Link],
        index: KeyIndex,
        tracker: UsageTracker,
        rng: Optional[random.Random] = None,
        reverse_links: bool = False,
        links_type: str = "Pokemon",
    ):
        self.pool = pool
        self.keys: List[str] = list(pool)
        self.index = index
        self.tracker = tracker
        self.rng = rng or random.Random()
        self.reverse_links = reverse_links
        self.links_type = links_type
        self.viable_ids = {
            link_id for link_id, link in pool.items() if index.is_viable(link, reverse_links)
        }
        self.current_link: Optional[Link] = None
        self.target_starts: List[str] = []
        self.target_ends: List[str] = []

    @property
    def has_targets(self) -> bool:
        return bool(self.target_starts or self.target_ends)

    def clear_targets(self) -> None:
        self.target_starts = []
        self.target_ends = []

    def get(self, text: str) -> Optional[Link]:
        """Look up a pool link by name or id."""
        return self.pool.get(to_id(text))

    def _consume(self, link: Link) -> Tuple[List[str], List[str], List[str], List[str]]:
        starts, ends = self.index.keys_for(link)
        self.tracker.mark_used(starts, ends)
        next_starts = self.tracker.filter_usable_starts(ends)
        next_ends = self.tracker.filter_usable_ends(starts) if self.reverse_links else []
        return starts, ends, next_starts, next_ends

    def _can_skip(self, link_to_skip: Link) -> bool:
        # The skipped link is allowed again once it is the only viable
        # alternative to the current link
        others = self.viable_ids - {link_to_skip.id}
        if self.current_link is not None:
            others.discard(self.current_link.id)
        return bool(others)

    def _random_link(self) -> Link:
        return self.pool[self.rng.choice(self.keys)]

    def _substitution_notice(self, link: Link, starts: List[str], ends: List[str]) -> str:
        exhausted = list(ends)
        if self.reverse_links:
            exhausted += [start for start in starts if start not in exhausted]
        keys = join_list([key.upper() for key in exhausted])
        if keys:
            text = f"There are no '{keys}' {self.links_type} links left after {link.name}!"
        else:
            text = f"There are no {self.links_type} links for {link.name}!"
        return f"{text} Substituting in a random {self.links_type}."

    def select_next(self, forced_id: Optional[str] = None) -> SelectionResult:
        """
        Select the next link and its target keys.

        Args:
            forced_id: Id or name of the link to continue from (an accepted
                guess). Ignored when it is not in the pool.

        Returns:
            SelectionResult: The chosen link, target keys and any
            substitution notice for the players
        """
        forced = self.get(forced_id) if forced_id else None
        link = forced or self._random_link()
        starts, ends, next_starts, next_ends = self._consume(link)

        link_to_skip: Optional[Link] = None
        skip_forced = False
        notice: Optional[str] = None
        resets = 0
        rejected: List[str] = []
        while (
            link == self.current_link
            or (not next_starts and not next_ends)
            or (skip_forced and link == link_to_skip)
        ):
            rejected.append(link.id)
            if forced is not None and link_to_skip is None:
                notice = self._substitution_notice(link, starts, ends)
                link_to_skip = link
                skip_forced = self._can_skip(link)
                logger.debug(f"Substituting for exhausted link {link.id}")
            self.tracker.reset()
            resets += 1
            link = self._random_link()
            starts, ends, next_starts, next_ends = self._consume(link)

        self.current_link = link
        self.target_starts = next_starts
        self.target_ends = next_ends
        self.tracker.used_ids.add(link.id)

        return SelectionResult(
            link=link,
            target_starts=list(next_starts),
            target_ends=list(next_ends),
            substituted=link_to_skip is not None,
            notice=notice,
            resets=resets,
            rejected=rejected,
        )

    def matches(self, link: Link) -> bool:
        """Check whether a link continues the current chain."""
        starts, ends = self.index.keys_for(link)
        if any(start in self.target_starts for start in starts):
            return True
        if self.reverse_links and any(end in self.target_ends for end in ends):
            return True
        return False
