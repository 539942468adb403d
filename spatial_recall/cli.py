"""
Spatial Recall CLI - Play the memory games in a terminal.

Usage:
    spatial-recall play <game>      Play a session (grid, die, voxel)
    spatial-recall replay <game>    Print a session's commands and audit trail
    spatial-recall games            List the games

Common options:
    --commands N        Number of commands (game default otherwise)
    --seed S            Seed for a reproducible session
    --weight KIND=W     Override a command-kind weight (repeatable)
    --speed F           Scale the reveal timing (0 shows everything at once)
"""

import argparse
import logging
import sys
import threading

from pydantic import ValidationError

from .config import GameConfig
from .engine_core.errors import EngineError
from .games.die import FACES, DieState
from .games.grid import GridState
from .games.registry import GAMES
from .games.voxel import CubeState, answer_key
from .session import Phase, PhaseScheduler, SessionManager

EMPTY_TOKENS = {".", "-", "_"}


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Spatial Recall - short-term spatial memory puzzles",
        prog="spatial-recall",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Play a session")
    _add_session_arguments(play_parser)
    play_parser.add_argument("--speed", type=float, default=1.0, help="Reveal timing factor")

    replay_parser = subparsers.add_parser("replay", help="Print a session's audit trail")
    _add_session_arguments(replay_parser)
    replay_parser.add_argument("--json", action="store_true", help="Print the session as JSON")

    subparsers.add_parser("games", help="List the games")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            return cmd_play(args)
        if args.command == "replay":
            return cmd_replay(args)
        if args.command == "games":
            return cmd_games(args)
    except (EngineError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


def _add_session_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("game", choices=sorted(GAMES), help="Game to play")
    parser.add_argument("--commands", type=int, default=None, help="Number of commands")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--weight",
        action="append",
        default=[],
        metavar="KIND=W",
        help="Command-kind weight override, e.g. rotate_cw=0.5",
    )


def build_config(args) -> GameConfig:
    """Game config with --weight overrides applied to the chosen game."""
    overrides = {}
    for item in args.weight:
        kind, sep, weight = item.partition("=")
        if not sep:
            raise ValueError(f"--weight expects KIND=W, got {item!r}")
        overrides[kind.strip()] = float(weight)

    config = GameConfig()
    if overrides:
        section = config.for_domain(args.game)
        section.weights = section.with_weights(overrides)
        section.kind_weights()
    return config


def cmd_games(args) -> int:
    """List the games."""
    for name, game in GAMES.items():
        print(f"{name:6} {game.title}")
    return 0


def cmd_replay(args) -> int:
    """Generate a session and print it without playing."""
    manager = SessionManager(config=build_config(args))
    session = manager.start_session(
        args.game, command_count=args.commands, seed=args.seed, schedule=False
    )

    if args.json:
        print(manager.export(session.session_id).model_dump_json(indent=2))
        return 0

    print(GAMES[args.game].title)
    if session.target_face:
        print(f"Question: what is on the {session.target_face.upper()} face?")
    print_history(session.history)
    return 0


def cmd_play(args) -> int:
    """Play one session interactively."""
    config = build_config(args)
    domain_config = config.for_domain(args.game)
    domain_config.timing = domain_config.timing.scaled(max(args.speed, 0.0))

    manager = SessionManager(config=config, scheduler=PhaseScheduler())
    answer_ready = threading.Event()

    def show_event(session, event):
        if event.phase == Phase.MEMORIZE:
            print("Memorize:")
            print(render_state(session.initial_state))
        elif event.phase == Phase.REVEAL and event.show_text:
            if event.command_index == 0 and sys.stdout.isatty():
                # Hide the starting configuration
                print("\033[2J\033[H", end="")
            print(f"Command {event.command_index + 1}: {session.commands[event.command_index].description}")
        elif event.phase == Phase.ANSWER:
            answer_ready.set()

    print(GAMES[args.game].title)
    if domain_config.timing.is_instant:
        # Nothing is hidden: show the start and every command up front
        session = manager.start_session(
            args.game, command_count=args.commands, seed=args.seed, schedule=False
        )
        print("Start:")
        print(render_state(session.initial_state))
        for index, command in enumerate(session.commands, start=1):
            print(f"{index}. {command.description}")
    else:
        session = manager.start_session(
            args.game, command_count=args.commands, seed=args.seed, listener=show_event
        )
        answer_ready.wait()

    while True:
        try:
            score = manager.submit(session.session_id, read_answer(session))
            break
        except ValidationError as e:
            print(f"Invalid answer ({e.error_count()} problem(s)): cells take up to two digits.")

    print(f"\nScore: {score.correct_count}/{score.total_cells}")
    print("Answer:")
    print(render_state(session.final_state))
    print_history(session.history)
    return 0


def read_answer(session):
    """Prompt for the answer in the shape the game expects."""
    if session.game == "die":
        return input(f"What is on the {session.target_face.upper()} face? ").strip()

    if session.game == "grid":
        print("Enter each row as three values separated by spaces ('.' for blank).")
        return [_read_tokens(f"Row {r + 1}: ") for r in range(3)]

    print("Enter each slice row as three values separated by spaces ('.' for empty).")
    cells = {}
    for z in range(3):
        print(f"Depth {z + 1}:")
        for y in range(3):
            for x, token in enumerate(_read_tokens(f"  Row {y + 1}: ")):
                cells[answer_key(x, y, z)] = token
    return cells


def _read_tokens(prompt: str) -> list[str]:
    tokens = input(prompt).split()[:3]
    return ["" if t in EMPTY_TOKENS else t for t in tokens]


def render_state(state) -> str:
    """Text picture of a configuration."""
    if isinstance(state, GridState):
        return "\n".join(" ".join(f"{v:>2}" for v in row) for row in state.rows)

    if isinstance(state, DieState):
        return "\n".join(f"{face:>6}: {state.face(face)}" for face in FACES)

    if isinstance(state, CubeState):
        slices = []
        for z in range(3):
            rows = state.slice_rows(z)
            lines = [" ".join(f"{v:>2}" if v is not None else " ." for v in row) for row in rows]
            slices.append(f"Depth {z + 1}\n" + "\n".join(lines))
        return "\n\n".join(slices)

    return repr(state)


def print_history(history) -> None:
    """Print the audit trail."""
    print("\nAudit trail:")
    for step in history:
        print(f"[{step.step_index}] {step.command_description}")
        print(render_state(step.state))
        print()


if __name__ == "__main__":
    sys.exit(main())
