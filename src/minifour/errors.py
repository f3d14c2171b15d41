from __future__ import annotations


class PlacementError(ValueError):
    """A move that could not be placed. The board is left untouched."""

    def __init__(self, column: object, message: str) -> None:
        super().__init__(message)
        self.column = column


class InvalidColumn(PlacementError):
    def __init__(self, column: object) -> None:
        super().__init__(column, f"Column {column!r} is not a valid column number (0-6).")


class ColumnFull(PlacementError):
    def __init__(self, column: int) -> None:
        super().__init__(column, f"Column {column} is already full. Try again.")


class GameOver(RuntimeError):
    pass


class NoValidMoves(RuntimeError):
    pass


class QuitGame(Exception):
    pass
