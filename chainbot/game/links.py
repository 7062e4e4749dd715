"""
Chain Links and Key Index

This module builds the candidate pool for a chain game and the key index
derived from it. A link's start keys are the first ``link_length`` characters
of its normalized id and its end keys are the last ``link_length``
characters. Two links chain when the end key of one is the start key of the
next (or the other way round when reverse linking is enabled).
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ConfigurationError

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def to_id(text: Optional[str]) -> str:
    """Normalize a name or guess: lowercase, alphanumeric characters only."""
    if not text:
        return ""
    return _NON_ALPHANUMERIC.sub("", text.lower())


@dataclass(frozen=True)
class Link:
    """A candidate chain element."""
    id: str
    name: str
    forme: bool = False

    @classmethod
    def from_name(cls, name: str, forme: bool = False) -> "Link":
        return cls(id=to_id(name), name=name, forme=forme)


def _valid_key(key: str, link_length: int) -> bool:
    # Keys that lead with a digit never chain ("porygon2" has no end key)
    return len(key) == link_length and not key[0].isdigit()


def get_link_starts(link: Link, link_length: int = 1) -> List[str]:
    """Return the start keys of a link (empty when it has none)."""
    start = link.id[:link_length]
    if not _valid_key(start, link_length):
        return []
    return [start]


def get_link_ends(link: Link, link_length: int = 1) -> List[str]:
    """Return the end keys of a link (empty when it has none)."""
    end = link.id[-link_length:] if link.id else ""
    if not _valid_key(end, link_length):
        return []
    return [end]


def build_pool(
    candidates: Iterable[Link],
    link_length: int = 1,
    letter_based: bool = True,
    accepts_formes: bool = False,
    excluded: Iterable[str] = (),
) -> Dict[str, Link]:
    """
    Build the candidate pool for a game.

    Args:
        candidates: Links supplied by the content source
        link_length: Number of characters in a start/end key
        letter_based: Drop links lacking a start key or an end key
        accepts_formes: Keep alternate formes
        excluded: Ids that never take part in letter-based games

    Returns:
        Dict: Link id -> Link, in source order

    Raises:
        ConfigurationError: If no candidate survives filtering
    """
    excluded_ids = {to_id(x) for x in excluded}
    pool: Dict[str, Link] = {}
    for link in candidates:
        if not link.id or link.id in pool:
            continue
        if link.forme and not accepts_formes:
            continue
        if letter_based:
            if link.id in excluded_ids:
                continue
            if not get_link_starts(link, link_length) or not get_link_ends(link, link_length):
                continue
        pool[link.id] = link

    if not pool:
        raise ConfigurationError("No links are available for this game.")
    return pool


class KeyIndex:
    """
    Number of distinct pool links exposing each start key and end key.

    The end index stays empty unless reverse linking is enabled.
    """

    def __init__(self, starts: Dict[str, int], ends: Dict[str, int], link_length: int = 1):
        self.starts = starts
        self.ends = ends
        self.link_length = link_length

    @classmethod
    def from_pool(cls, pool: Dict[str, Link], link_length: int = 1, reverse_links: bool = False) -> "KeyIndex":
        starts_by_key: Dict[str, set] = {}
        ends_by_key: Dict[str, set] = {}
        for link in pool.values():
            for start in get_link_starts(link, link_length):
                starts_by_key.setdefault(start, set()).add(link.id)
            if reverse_links:
                for end in get_link_ends(link, link_length):
                    ends_by_key.setdefault(end, set()).add(link.id)

        return cls(
            starts={key: len(ids) for key, ids in starts_by_key.items()},
            ends={key: len(ids) for key, ids in ends_by_key.items()},
            link_length=link_length,
        )

    def keys_for(self, link: Link) -> Tuple[List[str], List[str]]:
        """Return (start keys, end keys) of a link at this index's key length."""
        return get_link_starts(link, self.link_length), get_link_ends(link, self.link_length)

    def is_viable(self, link: Link, reverse_links: bool = False) -> bool:
        """
        Check whether a link can continue the chain at the start of a cycle.

        A link is viable when, right after its own keys are marked used, at
        least one of its end keys (or start keys, in reverse mode) still has
        an unused link left.
        """
        starts, ends = self.keys_for(link)
        for end in ends:
            count = self.starts.get(end, 0)
            if count - (1 if end in starts else 0) > 0:
                return True
        if reverse_links:
            for start in starts:
                count = self.ends.get(start, 0)
                if count - (1 if start in ends else 0) > 0:
                    return True
        return False


def check_playable(pool: Dict[str, Link], index: KeyIndex, reverse_links: bool = False) -> List[str]:
    """
    Make sure a pool can sustain a chain game.

    Link selection retries until it finds a viable link other than the
    current one, so at least two viable links are required.

    Returns:
        List: Ids of the viable links

    Raises:
        ConfigurationError: If fewer than two links are viable
    """
    viable = [link_id for link_id, link in pool.items() if index.is_viable(link, reverse_links)]
    if len(viable) < 2:
        raise ConfigurationError("Not enough links can be chained together for this game.")
    return viable
