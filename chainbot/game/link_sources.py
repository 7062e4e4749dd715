"""
Link Sources

Each chain variant draws its links from one content table. The variant is
resolved once when the game is set up, and the resulting source hands the
pool builder a flat list of links.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .errors import ConfigurationError
from .links import Link
from ..data import dex_data


@dataclass(frozen=True)
class LinkSource:
    """A content table usable as a chain pool."""
    name: str
    links_type: str
    names: Tuple[str, ...]
    formes: Tuple[str, ...] = ()
    excluded: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def get_links(self) -> List[Link]:
        links = [Link.from_name(name) for name in self.names]
        links.extend(Link.from_name(name, forme=True) for name in self.formes)
        return links


LINK_SOURCES: Dict[str, LinkSource] = {
    "pokemon": LinkSource(
        name="pokemon",
        links_type="Pokemon",
        names=tuple(dex_data.POKEMON),
        formes=tuple(dex_data.POKEMON_FORMES),
    ),
    "moves": LinkSource(
        name="moves",
        links_type="move",
        names=tuple(dex_data.MOVES),
        excluded=("hiddenpower",),
        aliases=("move",),
    ),
    "items": LinkSource(
        name="items",
        links_type="item",
        names=tuple(dex_data.ITEMS),
        aliases=("item",),
    ),
    "abilities": LinkSource(
        name="abilities",
        links_type="ability",
        names=tuple(dex_data.ABILITIES),
        aliases=("ability",),
    ),
}

DEFAULT_SOURCE = "pokemon"


def find_link_source(variant: Optional[str]) -> Optional[LinkSource]:
    """Find a source by name or alias, or None if there is no such variant."""
    key = (variant or DEFAULT_SOURCE).strip().lower()
    if key in LINK_SOURCES:
        return LINK_SOURCES[key]
    for source in LINK_SOURCES.values():
        if key in source.aliases:
            return source
    return None


def get_link_source(variant: Optional[str] = None) -> LinkSource:
    """
    Resolve a variant name to its link source.

    Raises:
        ConfigurationError: If the variant has no pool
    """
    source = find_link_source(variant)
    if source is None:
        raise ConfigurationError(f"Game variation '{variant}' has no pool.")
    return source
