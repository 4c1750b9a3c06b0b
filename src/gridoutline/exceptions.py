"""Exception hierarchy for gridoutline."""


class GridOutlineError(Exception):
    """Base exception for all gridoutline errors."""

    pass


class GridError(GridOutlineError):
    """Errors related to grid data."""

    pass


class GridShapeError(GridError):
    """Grid rows do not share one column count."""

    def __init__(self, widths: list[int]) -> None:
        self.widths = widths
        super().__init__(f"Grid rows must all have the same length, got lengths {widths}")


class GridLoadError(GridError):
    """Error loading a grid document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load grid '{path}': {reason}")


class ExportError(GridOutlineError):
    """Errors related to exporting rendered outlines."""

    pass


class SvgSaveError(ExportError):
    """Error saving an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save SVG '{path}': {reason}")


class InvalidScaleError(ExportError):
    """Unsupported bitmap export multiplier."""

    def __init__(self, scale: int, allowed: tuple[int, ...]) -> None:
        self.scale = scale
        self.allowed = allowed
        super().__init__(f"Pixel scale {scale} is not one of {', '.join(map(str, allowed))}")
