"""Entry point for Omok Rule AI games. Load config, wire the session, start a front end."""

import time
import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, silent
    from Board import AI, EMPTY, HUMAN
    from GameSession import GameSession
except ImportError:
    from Omok_Rule_AI.utils.cli import parse_args
    from Omok_Rule_AI.utils.logger import log_event, silent
    from Omok_Rule_AI.Board import AI, EMPTY, HUMAN
    from Omok_Rule_AI.GameSession import GameSession


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "front_end": "gui",
    "ai_delay_ms": 500,
    "seed": None,
    "window_size": 800,
    "log_moves": True,
}

STONE_CHARS = {EMPTY: ".", HUMAN: "X", AI: "O"}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Omok_Rule_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Load settings YAML over the defaults; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def merge_args(settings, args):
    """Apply CLI overrides on top of loaded settings."""
    merged = dict(settings)
    if args.gui:
        merged["front_end"] = "gui"
    elif args.console:
        merged["front_end"] = "console"
    if args.delay_ms is not None:
        merged["ai_delay_ms"] = args.delay_ms
    if args.seed is not None:
        merged["seed"] = args.seed
    if args.window_size is not None:
        merged["window_size"] = args.window_size
    if args.quiet:
        merged["log_moves"] = False
    return merged


def render_console(snapshot):
    """Text board with X for human and O for AI stones; [ marks the win line, * the last move."""
    size = snapshot.board_size
    win_cells = set(snapshot.win_line or ())
    lines = ["    " + " ".join(f"{c:2d}" for c in range(size))]
    for r, row in enumerate(snapshot.board):
        cells = []
        for c, value in enumerate(row):
            mark = STONE_CHARS[value]
            if (r, c) in win_cells:
                cells.append(f"[{mark}")
            elif snapshot.last_move == (r, c):
                cells.append(f"*{mark}")
            else:
                cells.append(f" {mark}")
        lines.append(f"{r:2d}  " + " ".join(cells))
    lines.append(snapshot.status_text)
    return "\n".join(lines)


def run_console(session, input_fn=input, output_fn=print):
    """Console loop: 'row col' to move, 'u' undo, 'r' restart, 'q' quit."""
    output_fn(render_console(session.snapshot))
    while True:
        try:
            raw = input_fn("Move ('row col', u=undo, r=restart, q=quit): ").strip().lower()
        except EOFError:
            return
        if raw in ("q", "quit"):
            return
        if raw in ("u", "undo"):
            if not session.undo():
                output_fn("Nothing to undo yet.")
        elif raw in ("r", "restart"):
            session.restart()
        else:
            try:
                r_str, c_str = raw.split()
                row, col = int(r_str), int(c_str)
            except ValueError:
                output_fn("Invalid input format; expected two integers")
                continue
            if not session.submit_move(row, col):
                output_fn("Illegal move.")
                continue

        if session.ai_pending:
            output_fn(render_console(session.snapshot))
            time.sleep(max(0.0, session.ai_delay))
            session.run_pending()
        output_fn(render_console(session.snapshot))


def main(argv=None):
    args = parse_args(argv)
    settings = merge_args(load_settings(args.settings), args)

    logger = log_event if settings.get("log_moves", True) else silent
    session = GameSession(
        ai_delay=settings["ai_delay_ms"] / 1000.0,
        logger=logger,
        rng_seed=settings.get("seed"),
    )

    if settings["front_end"] == "console":
        run_console(session)
        return

    if settings["front_end"] != "gui":
        raise ValueError(f"Unsupported front end: {settings['front_end']}")

    try:
        from gui.pygame_view import PygameView
    except ImportError:
        from Omok_Rule_AI.gui.pygame_view import PygameView

    view = PygameView(window_size=settings["window_size"])
    try:
        view.run(session)
    finally:
        view.close()


if __name__ == "__main__":
    main()
