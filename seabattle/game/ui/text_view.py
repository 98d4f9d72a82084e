"""Plain-text rendering of a game view."""

from __future__ import annotations

from seabattle.game.app.projection import BoardView, CellView, GameView

GLYPHS: dict[CellView, str] = {
    CellView.EMPTY: ".",
    CellView.SHIP: "#",
    CellView.HIT: "X",
    CellView.MISS: "o",
}
BOARD_GAP = "    "


def render_board(board: BoardView) -> list[str]:
    """Board lines: a title, a column header, then one line per row."""
    size = len(board.cells)
    width = 3 + 2 * size
    lines = [board.title.ljust(width), "   " + " ".join(str(col) for col in range(size)) + " "]
    for row_index, row in enumerate(board.cells):
        glyphs = " ".join(GLYPHS[cell] for cell in row)
        lines.append(f"{row_index:>2} {glyphs} ")
    return lines


def render_game_view(view: GameView) -> str:
    left = render_board(view.your_board)
    right = render_board(view.enemy_board)
    lines = [view.status, ""]
    lines.extend(f"{a}{BOARD_GAP}{b}".rstrip() for a, b in zip(left, right))
    lines.append("")
    if view.messages:
        lines.extend(f"[{message.kind.value}] {message.text}" for message in view.messages)
    else:
        lines.append("No messages yet.")
    return "\n".join(lines)
