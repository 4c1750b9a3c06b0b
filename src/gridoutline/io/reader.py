"""Grid reader for loading grid documents.

This module provides the GridReader class for loading grids from disk.
Two formats are supported:

- Plain text (any extension other than .json): one row per line,
  ``#``/``1``/``X`` for filled cells, ``.``/``0``/``-``/space for empty
  ones. Short lines are padded with empty cells; blank lines are skipped.
- JSON (``.json``): ``{"grid": [...], "overrides": [...],
  "bridges": [...], "settings": {...}}`` where only "grid" is required.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gridoutline.config import OutlineSettings
from gridoutline.domain import BridgeSet, CellCoord, CellOverride, Grid
from gridoutline.domain.grid import FILLED_CHARS
from gridoutline.exceptions import GridError, GridLoadError

EMPTY_CHARS = ".0- "


@dataclass
class GridDocument:
    """A grid together with its per-cell and bridge settings.

    Attributes:
        grid: Occupancy grid
        overrides: Per-cell radius overrides keyed by cell
        bridges: User-activated bridges (None when the document has none)
        settings: Settings stored in the document (None when absent)
    """

    grid: Grid
    overrides: dict[CellCoord, CellOverride] = field(default_factory=dict)
    bridges: BridgeSet | None = None
    settings: OutlineSettings | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document layout."""
        data: dict[str, Any] = self.grid.to_dict()
        if self.overrides:
            data["overrides"] = [
                {"row": coord.row, "col": coord.col, **override.to_dict()}
                for coord, override in sorted(self.overrides.items())
            ]
        if self.bridges is not None:
            data["bridges"] = self.bridges.to_list()
        if self.settings is not None:
            data["settings"] = self.settings.model_dump(mode="json", exclude={"logging"})
        return data


def parse_text_grid(text: str) -> Grid:
    """Parse a plain text grid.

    Args:
        text: Grid rows separated by newlines

    Returns:
        Parsed grid

    Raises:
        ValueError: If a row contains an unknown cell character
    """
    lines = [line.rstrip("\r\n") for line in text.splitlines()]
    lines = [line for line in lines if line.strip()]
    width = max((len(line) for line in lines), default=0)

    rows: list[list[bool]] = []
    for line_no, line in enumerate(lines, start=1):
        row = []
        for ch in line.ljust(width):
            if ch in FILLED_CHARS:
                row.append(True)
            elif ch in EMPTY_CHARS:
                row.append(False)
            else:
                raise ValueError(f"unknown cell character {ch!r} on row {line_no}")
        rows.append(row)

    return Grid(rows)


def parse_grid_document(data: dict[str, Any]) -> GridDocument:
    """Build a GridDocument from decoded JSON.

    Raises:
        KeyError: If the "grid" entry is missing
        ValueError: If overrides, bridges or settings are malformed
    """
    grid = Grid.from_dict(data)

    overrides: dict[CellCoord, CellOverride] = {}
    for item in data.get("overrides", []):
        coord = CellCoord(int(item["row"]), int(item["col"]))
        overrides[coord] = CellOverride.from_dict(item)

    bridges = BridgeSet.from_list(data["bridges"]) if "bridges" in data else None

    settings = None
    if "settings" in data:
        settings = OutlineSettings.model_validate(data["settings"])

    return GridDocument(grid=grid, overrides=overrides, bridges=bridges, settings=settings)


class GridReader:
    """Loads grid documents from disk.

    Example:
        reader = GridReader(Path("shape.txt"))
        document = reader.load()
        print(document.grid.rows)
    """

    def __init__(self, grid_path: Path) -> None:
        """Initialize the grid reader.

        Args:
            grid_path: Path to a text or JSON grid document
        """
        self._grid_path = grid_path

    @property
    def format(self) -> str:
        """Return 'JSON' for .json documents and 'Text' otherwise."""
        return "JSON" if self._grid_path.suffix.lower() == ".json" else "Text"

    def load(self) -> GridDocument:
        """Load and parse the grid document.

        Returns:
            Parsed GridDocument

        Raises:
            GridLoadError: If the file is missing, unreadable or malformed
        """
        path = str(self._grid_path)
        try:
            text = self._grid_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise GridLoadError(path, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise GridLoadError(path, str(e)) from e

        try:
            if self.format == "JSON":
                return parse_grid_document(json.loads(text))
            return GridDocument(grid=parse_text_grid(text))
        except json.JSONDecodeError as e:
            raise GridLoadError(path, f"invalid JSON: {e}") from e
        except KeyError as e:
            raise GridLoadError(path, f"missing field {e}") from e
        except ValidationError as e:
            raise GridLoadError(path, f"invalid settings: {e.error_count()} error(s)") from e
        except (GridError, ValueError, TypeError) as e:
            raise GridLoadError(path, str(e)) from e
