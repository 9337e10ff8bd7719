"""CLI entrypoint for the Rubik's cube engine."""

from __future__ import annotations

import argparse
import json
import logging

from .config import LOG_LEVELS, OUTPUT_FORMATS, ConfigError, CubeConfig, load_config
from .engine import RubiksCube
from .facelets import StateValidationError, render_net


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rubik's cube 3x3 move engine")
    parser.add_argument("--config", type=str, default=None, help="YAML file with default options")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS)
    parser.add_argument("--format", dest="output", default=None, choices=OUTPUT_FORMATS)
    sub = parser.add_subparsers(dest="command", required=True)

    apply = sub.add_parser("apply", help="Apply a move sequence to a cube")
    apply.add_argument("sequence", help="Moves such as \"R U R' U'\"")
    apply.add_argument("--state", type=str, default=None, help="54 color codes to start from")

    scramble = sub.add_parser("scramble", help="Scramble a solved cube")
    scramble.add_argument("--moves", type=int, default=None)
    scramble.add_argument("--seed", type=int, default=None)

    return parser


def _resolve_config(args: argparse.Namespace) -> CubeConfig:
    config = load_config(args.config) if args.config else CubeConfig()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.output is not None:
        config.output = args.output
    if getattr(args, "moves", None) is not None:
        config.scramble_moves = args.moves
    if getattr(args, "seed", None) is not None:
        config.seed = args.seed
    return config


def _print_result(config: CubeConfig, payload: dict, scramble: list[str] | None = None) -> None:
    if config.output == "json":
        if scramble is not None:
            payload = {**payload, "scramble": scramble}
        print(json.dumps(payload))
        return

    if scramble is not None:
        print(f"Scramble: {' '.join(scramble)}")
    print(render_net(payload["state"]))
    print(f"History: {' '.join(payload['move_history']) or '(none)'}")
    print(f"Solved: {'yes' if payload['solved'] else 'no'}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except (OSError, ConfigError) as exc:
        parser.error(str(exc))
    logging.basicConfig(level=config.logging_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "apply":
            cube = RubiksCube(initial_state=args.state)
            cube.apply_move_sequence(args.sequence)
            _print_result(config, cube.state_payload())
            return 0

        if args.command == "scramble":
            cube = RubiksCube(seed=config.seed)
            moves = cube.scramble(config.scramble_moves)
            _print_result(config, cube.state_payload(), scramble=moves)
            return 0
    except StateValidationError as exc:
        parser.error(str(exc))

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
