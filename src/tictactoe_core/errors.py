"""Move errors. All are recoverable; a raising call never mutates the session."""

from .game_basics import Side


class MoveError(ValueError):
    pass


class CellOccupied(MoveError):
    def __init__(self, cell: int):
        super().__init__(f"Cell {cell} is already occupied")
        self.cell = cell


class GameAlreadyOver(MoveError):
    def __init__(self, result: object):
        super().__init__(f"Game is already over ({result})")
        self.result = result


class InvalidCell(MoveError):
    def __init__(self, cell: object):
        super().__init__(f"Invalid cell {cell!r}. Must be an index 0-8.")
        self.cell = cell


class NoAvailableMove(MoveError):
    def __init__(self):
        super().__init__("No available move: board is full")


class WrongTurn(MoveError):
    def __init__(self, side: Side, scripted: bool):
        who = "the scripted opponent" if scripted else "a human player"
        super().__init__(f"{side.symbol} is played by {who}")
        self.side = side
        self.scripted = scripted
