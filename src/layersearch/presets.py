"""Emergency response presets - canned searches that seed the selection.

Each preset runs a list of search terms and activates the top few
mappable layers per term.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PER_TERM = 2


@dataclass(frozen=True)
class Preset:
    """A named bundle of search terms.

    Attributes:
        name: Identifier used by callers ("hurricane", "wildfire").
        label: Human-readable title.
        terms: Queries run in order; results are concatenated.
        per_term: Max mappable layers taken from each term's results.
    """

    name: str
    label: str
    terms: tuple[str, ...]
    per_term: int = DEFAULT_PER_TERM


HURRICANE = Preset(
    name="hurricane",
    label="Hurricane response",
    terms=(
        "hospital",
        "emergency medical",
        "shelter",
        "power plant",
        "airport",
        "evacuation route",
    ),
)

WILDFIRE = Preset(
    name="wildfire",
    label="Wildfire response",
    terms=(
        "fire station",
        "hospital",
        "evacuation",
        "water",
        "helipad",
        "airport",
    ),
)

PRESETS: dict[str, Preset] = {p.name: p for p in (HURRICANE, WILDFIRE)}


def get_preset(name: str) -> Preset | None:
    return PRESETS.get(name.lower())
