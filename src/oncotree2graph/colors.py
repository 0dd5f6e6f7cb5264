"""Map OncoTree color names onto renderer color identifiers."""

from __future__ import annotations

import logging
from typing import Final

import networkx as nx

from oncotree2graph.exceptions import NoColorMappedError

logger = logging.getLogger(__name__)

NO_COLOR_MAPPED: Final[str] = "NoColorMapped"

# Source names as they occur in OncoTree releases, including case variants.
COLOR_MAP: Final[dict[str, str]] = {
    "Black": "black",
    "black": "black",
    "Blue": "blue",
    "blue": "blue",
    "Brown": "brown",
    "Cyan": "cyan",
    "DarkRed": "darkred",
    "DarkBlue": "darkblue",
    "Gainsboro": "gainsboro",
    "Gold": "gold",
    "Gray": "gray",
    "Green": "green",
    "HotPink": "hotpink",
    "LightBlue": "lightblue",
    "LightSalmon": "lightsalmon",
    "LightSkyBlue": "lightskyblue",
    "LightYellow": "lightyellow",
    "LimeGreen": "limegreen",
    "MediumSeaGreen": "mediumseagreen",
    "Orange": "orange",
    "PeachPuff": "peachpuff",
    "Purple": "purple",
    "Red": "red",
    "SaddleBrown": "saddlebrown",
    "Teal": "teal",
    "White": "white",
    "Yellow": "yellow",
}


def map_color(name: str) -> str:
    """Return the renderer color for an OncoTree color name.

    Raises:
        NoColorMappedError: If ``name`` has no entry in COLOR_MAP.
    """
    try:
        return COLOR_MAP[name]
    except KeyError:
        raise NoColorMappedError(name) from None


def apply_color_mapping(graph: nx.DiGraph, *, attribute: str = "render_color") -> list[str]:
    """Set a renderer color on every node of ``graph``.

    Nodes whose color has no mapping keep their place in the graph and get
    NO_COLOR_MAPPED instead.

    Returns:
        Codes of the nodes that could not be mapped, sorted.
    """
    unmapped: list[str] = []
    for code, data in graph.nodes(data=True):
        try:
            data[attribute] = map_color(data.get("color", ""))
        except NoColorMappedError:
            data[attribute] = NO_COLOR_MAPPED
            unmapped.append(code)

    if unmapped:
        logger.warning(
            "%d node(s) have no color mapping: %s",
            len(unmapped),
            ", ".join(sorted(unmapped)[:10]),
        )
    return sorted(unmapped)
