"""
Named-Area Grid Layouts

Turns an ASCII-art area map into a grid container block plus one
``grid-area`` block per named area.

Example::

    layout = grid_areas(
        ["header header", "sidebar main", "footer footer"],
        columns="240px 1fr",
        gap="16px",
    )
    layout.container.as_dict()["grid-template-areas"]
    # '"header header" "sidebar main" "footer footer"'
    list(layout.areas)
    # ['header', 'sidebar', 'main', 'footer']
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from stylekit.core.logging_config import get_logger, log_with_context
from stylekit.domain.blocks import StyleBlock
from stylekit.domain.constants import grid_defaults
from stylekit.utils.error_handling import log_and_raise
from stylekit.validation import ConfigError, InputValidator

logger = get_logger(__name__)


@dataclass(frozen=True)
class GridTemplate:
    """
    Expanded grid layout.

    Attributes:
        container: Declarations for the grid container
        areas: Area name -> block placing a child in that area (row-major first appearance)
    """

    container: StyleBlock
    areas: dict[str, StyleBlock] = field(default_factory=dict)

    @property
    def area_names(self) -> tuple[str, ...]:
        return tuple(self.areas)


def _is_empty_cell(token: str) -> bool:
    return set(token) == {grid_defaults.EMPTY_CELL}


def _tokenize(row: str | Sequence[str]) -> list[str]:
    if isinstance(row, str):
        return row.split()
    if not isinstance(row, Sequence) or isinstance(row, (bytes, bytearray)):
        raise ConfigError(f"Grid row must be a string or a list of cell names: {row!r}")
    if not all(isinstance(cell, str) for cell in row):
        raise ConfigError(f"Grid row cells must be strings: {row!r}")
    return [cell.strip() for cell in row]


def parse_areas(rows: Sequence[str | Sequence[str]]) -> list[list[str]]:
    """
    Parse and validate an area map into a matrix of cell names.

    Runs of "." are normalized to a single "." empty cell.

    Raises:
        ConfigError: If the map is empty, ragged, or an area is not a rectangle
    """
    rows = InputValidator.validate_sequence(rows, "rows")
    if not rows:
        raise ConfigError("Grid needs at least one row")

    matrix = []
    for row in rows:
        cells = _tokenize(row)
        if not cells or not all(cells):
            raise ConfigError(f"Grid row is empty or has blank cells: {row!r}")
        matrix.append([grid_defaults.EMPTY_CELL if _is_empty_cell(cell) else cell for cell in cells])

    width = len(matrix[0])
    for index, cells in enumerate(matrix):
        if len(cells) != width:
            raise ConfigError(f"Grid row {index} has {len(cells)} cells, expected {width}")

    bounds: dict[str, list[int]] = {}
    for r, cells in enumerate(matrix):
        for c, name in enumerate(cells):
            if name == grid_defaults.EMPTY_CELL:
                continue
            if name not in bounds:
                bounds[name] = [r, c, r, c]
            else:
                box = bounds[name]
                box[0], box[1] = min(box[0], r), min(box[1], c)
                box[2], box[3] = max(box[2], r), max(box[3], c)

    for name, (top, left, bottom, right) in bounds.items():
        for r in range(top, bottom + 1):
            for c in range(left, right + 1):
                if matrix[r][c] != name:
                    raise ConfigError(f"Grid area '{name}' is not a rectangle")

    return matrix


def _column_tracks(columns: str | Sequence[str]) -> list[str]:
    if isinstance(columns, str):
        return columns.split()
    if not isinstance(columns, Sequence) or isinstance(columns, (bytes, bytearray)):
        raise ConfigError(f"Grid columns must be a string or a list of tracks, got {type(columns).__name__}")
    return [str(track) for track in columns]


def grid_areas(
    rows: Sequence[str | Sequence[str]],
    columns: str | Sequence[str] | None = None,
    gap: str | None = None,
) -> GridTemplate:
    """
    Expand an area map into grid declarations.

    Args:
        rows: Row strings ("header header") or lists of cell names
        columns: Optional column tracks, one per grid column
        gap: Optional gap value

    Returns:
        GridTemplate with the container block and per-area blocks

    Raises:
        ConfigError: If the area map or column track count is invalid
    """
    try:
        matrix = parse_areas(rows)

        tracks = None
        if columns is not None:
            tracks = _column_tracks(columns)
            if len(tracks) != len(matrix[0]):
                raise ConfigError(f"Grid has {len(matrix[0])} columns but {len(tracks)} column tracks were given")
    except ConfigError as e:
        log_and_raise(logger, e, context={"rows": rows, "columns": columns}, error_type="Grid expansion")

    template = " ".join('"' + " ".join(cells) + '"' for cells in matrix)
    declarations = [("display", "grid"), ("grid-template-areas", template)]
    if tracks:
        declarations.append(("grid-template-columns", " ".join(tracks)))
    if gap is not None:
        declarations.append(("gap", gap))

    areas = {}
    for cells in matrix:
        for name in cells:
            if name != grid_defaults.EMPTY_CELL and name not in areas:
                areas[name] = StyleBlock.of([("grid-area", name)])

    log_with_context(logger, "debug", "Expanded grid areas", rows=len(matrix), areas=len(areas))
    return GridTemplate(StyleBlock.of(declarations), areas)
