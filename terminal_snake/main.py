import argparse
import logging
import random
import sys
from typing import List, Optional

from config import GameConfig, load_config
from domain.constants import AXIS_DELTAS
from game_loop import GameLoop
from players.registry import AVAILABLE_PLAYERS, get_player_class
from services.renderer import TerminalRenderer
from services.terminal import TerminalError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys steer, Escape quits."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Width of the board in cells")
    parser.add_argument("--height", type=int, default=None,
                        help="Height of the board in cells")
    parser.add_argument("--size", type=int, default=None,
                        help="Square board: sets both width and height")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Delay between ticks in milliseconds")
    parser.add_argument("--restart", action="store_true", default=None,
                        help="Start a new game after dying instead of exiting")
    parser.add_argument("--restart-delay-ms", type=int, default=None,
                        help="Pause before a restarted game begins")
    parser.add_argument("--axes", choices=sorted(AXIS_DELTAS), default=None,
                        help="Which grid axis UP/DOWN move along")
    parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="keyboard",
                        help="Input source; 'random' plays by itself")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for fruit placement and the random player")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen between frames")
    return parser


def resolve_config(args: argparse.Namespace, base: GameConfig) -> GameConfig:
    """Layer command-line flags over the environment configuration."""
    width = args.width if args.width is not None else args.size
    height = args.height if args.height is not None else args.size
    return base.with_overrides(
        width=width,
        height=height,
        tick_ms=args.tick_ms,
        restart_on_death=args.restart,
        restart_delay_ms=args.restart_delay_ms,
        axes=args.axes,
    )


def configure_logging(config: GameConfig):
    # Log to a file or stderr so stdout only carries the frames
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=config.log_file,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args, load_config())
    except ValueError as e:
        parser.error(str(e))

    configure_logging(config)

    rng = random.Random(args.seed)
    player_class = get_player_class(args.player)
    player = player_class(rng=rng) if args.player == "random" else player_class()
    renderer = TerminalRenderer(clear=not args.no_clear)
    loop = GameLoop(config, player, renderer, rng=rng)

    logger.info(
        f"Starting {config.width}x{config.height} game, tick {config.tick_ms}ms, "
        f"restart={config.restart_on_death}, axes={config.axes}, player={args.player}"
    )

    try:
        return loop.run(max_ticks=args.max_ticks)
    except TerminalError as e:
        logger.critical(f"Terminal failure: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
