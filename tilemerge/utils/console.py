"""Plain-text rendering of a game state."""


def format_board(state) -> str:
    """
    Format a game state as a tab-separated table followed by a status line.

    Parameters
    ----------
    state : GameState
        The snapshot to render.

    Returns
    -------
    str
        One line per row, empty cells shown as ``.``, then the score line.
    """
    lines = [' \t'.join(str(value) if value else '.' for value in row) for row in state.values.tolist()]

    status = f'score={state.score} best={state.best_score}'
    if state.won:
        status += ' won'
    if state.over:
        status += ' over'
    lines.append(status)
    return '\n'.join(lines)
