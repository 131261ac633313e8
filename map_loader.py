import json
import os
from numbers import Real
from typing import List, Optional, Tuple
import config as C
from state import GameState
from territory import Territory


class MapLoadError(Exception):
    """Raised when the map data file is missing or malformed."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def parse_territory(record, index: int) -> Territory:
    """
    Validate one territory record and convert it to a Territory.
    Expected shape: {"name": str, "vertices": [[x, y], ...], "owner": int, "armies": int, "selected": bool}
    """
    if not isinstance(record, dict):
        raise MapLoadError(f"Territory {index} is not an object")

    name = record.get("name")
    if not isinstance(name, str):
        raise MapLoadError(f"Territory {index} has no valid name")

    raw_vertices = record.get("vertices")
    if not isinstance(raw_vertices, list):
        raise MapLoadError(f"Territory {index} ({name}) has no vertex list")
    if len(raw_vertices) < C.MIN_VERTICES:
        raise MapLoadError(
            f"Territory {index} ({name}) has {len(raw_vertices)} vertices, needs at least {C.MIN_VERTICES}"
        )
    vertices = []
    for v in raw_vertices:
        if not isinstance(v, (list, tuple)) or len(v) != 2 or not all(_is_number(c) for c in v):
            raise MapLoadError(f"Territory {index} ({name}) has invalid vertex {v!r}")
        try:
            vertices.append((float(v[0]), float(v[1])))
        except (OverflowError, ValueError) as e:
            raise MapLoadError(f"Territory {index} ({name}) has out-of-range vertex: {e}") from e

    owner = record.get("owner")
    if not _is_int(owner) or owner < 0:
        raise MapLoadError(f"Territory {index} ({name}) has invalid owner {owner!r}")

    armies = record.get("armies")
    if not _is_int(armies):
        raise MapLoadError(f"Territory {index} ({name}) has invalid army count {armies!r}")

    if not isinstance(record.get("selected", False), bool):
        raise MapLoadError(f"Territory {index} ({name}) has non-boolean 'selected'")

    return Territory(name=name, vertices=tuple(vertices), owner=owner, armies=armies)


def _read_records(filename: str) -> list:
    if not os.path.exists(filename):
        raise MapLoadError(f"Map file {filename} does not exist")
    try:
        with open(filename, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MapLoadError(f"Map file {filename} is not valid JSON: {e}") from e
    except ValueError as e:
        # Undecodable bytes or oversized numeric literals
        raise MapLoadError(f"Map file {filename} could not be decoded: {e}") from e
    except OSError as e:
        raise MapLoadError(f"Could not read map file {filename}: {e}") from e

    if not isinstance(data, list):
        raise MapLoadError(f"Map file {filename} must contain a list of territories")
    if not data:
        raise MapLoadError(f"Map file {filename} contains no territories")
    return data


def _load(filename: str) -> Tuple[List[Territory], Optional[int]]:
    records = _read_records(filename)
    territories = []
    selected_index = None
    for idx, record in enumerate(records):
        territories.append(parse_territory(record, idx))
        if record.get("selected", False):
            selected_index = idx
    return territories, selected_index


def load_territories(filename: str = C.MAP_FILE) -> List[Territory]:
    """Load and validate every territory in the file. Any bad record aborts the load."""
    territories, _ = _load(filename)
    return territories


def load_game_state(filename: str = C.MAP_FILE) -> GameState:
    """
    Build a fresh GameState from a map file.
    A record flagged "selected" becomes the initial selection (the last one wins).
    """
    territories, selected_index = _load(filename)
    state = GameState(territories=tuple(territories), selected_index=selected_index)
    print(f"Map loaded from {filename}: {len(territories)} territories")
    return state
