"""Wind direction helpers - degrees to compass points and arrow glyphs."""
import math
from typing import List, Optional

COMPASS_POINTS: List[str] = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# Arrow points to where the wind is coming FROM (0° = north wind = ↑)
ARROWS: List[str] = ["↑", "↗", "→", "↘", "↓", "↙", "←", "↖"]

NO_DATA_ARROW = "↑"

SECTOR_WIDTH = 360.0 / len(COMPASS_POINTS)


def normalize_degrees(degrees: float) -> float:
    """Wrap any bearing into [0, 360)."""
    normalized = math.fmod(degrees, 360.0)
    if normalized < 0:
        normalized += 360.0
    if normalized >= 360.0:
        normalized -= 360.0
    return normalized


def compass_index(degrees: float) -> int:
    """
    Index into COMPASS_POINTS for a bearing.

    Sectors are 22.5° wide and centered on each point, so 348.75° up to
    (but excluding) 11.25° is N.
    """
    normalized = normalize_degrees(degrees)
    return int(math.floor((normalized + SECTOR_WIDTH / 2) / SECTOR_WIDTH)) % len(COMPASS_POINTS)


def compass_direction(degrees: Optional[float]) -> Optional[str]:
    """
    Convert a bearing to a 16-point compass label.

    Args:
        degrees: Wind direction in degrees, or None when unknown

    Returns:
        Compass label (e.g. "SSW"), or None when degrees is None
    """
    if degrees is None:
        return None
    return COMPASS_POINTS[compass_index(degrees)]


def arrow_index(degrees: float) -> int:
    # Each 45° arrow sector spans two adjacent compass sectors, so the arrow
    # never disagrees with the compass label at a boundary.
    return ((compass_index(degrees) + 1) // 2) % len(ARROWS)


def wind_arrow(degrees: Optional[float]) -> str:
    """Arrow glyph for a bearing; NO_DATA_ARROW when the direction is unknown."""
    if degrees is None:
        return NO_DATA_ARROW
    return ARROWS[arrow_index(degrees)]
