class GenerationError(Exception):
    """Base class for failures raised by a generation run."""


class InvalidDimensions(GenerationError, ValueError):
    def __init__(self, width: int, height: int):
        super().__init__(f"stage must be odd-sized and non-empty, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(GenerationError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y
