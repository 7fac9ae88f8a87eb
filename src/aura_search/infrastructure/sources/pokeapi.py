"""
PokéAPI Integration

Game-database source. The API is keyed by exact species name, so the query
is slugified first; when that misses, the bulk species listing is scanned
for the first name containing the slug's first 4 characters and the lookup
is retried once with that name.

The summary and key points are generated from structured attributes
(types, measurements, abilities); PokéAPI carries no free text worth quoting.

API Documentation: https://pokeapi.co/docs/v2
"""

from __future__ import annotations

import logging
import re
import urllib.parse
from typing import TYPE_CHECKING, Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import _CONTINUE, BaseSourceAdapter

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
POKEDEX_URL = "https://www.pokemon.com/us/pokedex"
SPECIES_LISTING_LIMIT = 1000
PARTIAL_MATCH_PREFIX = 4

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")


def slugify(query: str) -> str:
    """Lowercase and drop everything outside [a-z0-9]."""
    return _NON_SLUG_CHARS.sub("", query.lower())


def _format_number(value: float) -> str:
    """Render like a JS number: 6.0 -> '6', 0.7 -> '0.7'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class PokeAPIClient(BaseSourceAdapter):
    """
    PokéAPI lookup with partial-name fallback.

    Usage:
        async with PokeAPIClient() as client:
            results = await client.search("Pikachu!")
    """

    _service_name = "PokeAPI"
    category = "Pokémon Database"
    source_type = SourceType.POKEMON

    def __init__(self, timeout: float = 30.0, **kwargs: Any):
        super().__init__(base_url=POKEAPI_BASE_URL, timeout=timeout, min_interval=0.05, **kwargs)

    def _handle_expected_status(self, response: httpx.Response, url: str) -> Any:
        """404 is the normal 'no such Pokémon' answer."""
        if response.status_code == 404:
            logger.debug(f"PokeAPI: not found - {url}")
            return None
        return _CONTINUE

    async def get_pokemon(self, name: str) -> dict[str, Any] | None:
        data = await self._make_request(f"/pokemon/{urllib.parse.quote(name, safe='')}")
        return data if isinstance(data, dict) else None

    async def find_partial_match(self, slug: str) -> str | None:
        """Linear scan of the species listing for a name containing slug[:4]."""
        data = await self._make_request("/pokemon-species", params={"limit": SPECIES_LISTING_LIMIT})
        if not isinstance(data, dict):
            return None

        prefix = slug[:PARTIAL_MATCH_PREFIX]
        for species in data["results"]:
            if prefix in species["name"]:
                return species["name"]
        return None

    async def _search(self, query: str) -> list[NormalizedResult]:
        slug = slugify(query)
        if not slug:
            return []

        data = await self.get_pokemon(slug)
        if data is None:
            match = await self.find_partial_match(slug)
            if match is None:
                logger.debug(f"PokeAPI: no species matches {slug!r}")
                return []
            logger.debug(f"PokeAPI: {slug!r} matched species {match!r}")
            data = await self.get_pokemon(match)
            if data is None:
                return []

        return [format_pokemon(data)]


def format_pokemon(data: dict[str, Any]) -> NormalizedResult:
    """Build the single result for one Pokémon payload."""
    name = data["name"]
    types = [t["type"]["name"] for t in data["types"]]
    abilities = [a["ability"]["name"] for a in data["abilities"]]
    hp = data["stats"][0]["base_stat"]

    artwork = ((data.get("sprites") or {}).get("other") or {}).get("official-artwork") or {}

    return NormalizedResult(
        title=name[:1].upper() + name[1:],
        summary=f"{name} is a {'/'.join(types)} type Pokémon with {hp} HP.",
        key_points=(
            f"Type: {', '.join(types)}",
            f"Height: {_format_number(data['height'] / 10)}m",
            f"Weight: {_format_number(data['weight'] / 10)}kg",
            f"Abilities: {', '.join(abilities)}",
        ),
        thumbnail=artwork.get("front_default"),
        url=f"{POKEDEX_URL}/{name}",
        source_type=SourceType.POKEMON,
    )
