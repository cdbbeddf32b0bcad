"""
Crypto Ninja CLI - Command-line interface for the game.

Usage:
    cryptoninja serve [--host H] [--port P]    Run the frame API with uvicorn
    cryptoninja play [--seed N]                Play in the terminal
"""

import argparse
import logging
import random
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Crypto Ninja - Slice the crypto coins!",
        prog="cryptoninja",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the frame API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args(argv)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "play":
        cmd_play(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the frame API."""
    import uvicorn

    from .api.app import LOG_LEVEL

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(
        "cryptoninja.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=LOG_LEVEL.lower(),
    )


def print_frame(frame, out):
    """Print a frame as a title line and numbered buttons."""
    print(f"\n{frame.title}", file=out)
    for i, button in enumerate(frame.buttons, start=1):
        print(f"  [{i}] {button.label}", file=out)


def cmd_play(args, input_fn=input, out=None):
    """
    Play in the terminal.

    The state goes through the codec between presses, the same way it
    travels through a frame client.
    """
    from .engine_core import GameEngine, GameConfig
    from .api.service import FrameService

    out = out or sys.stdout
    engine = GameEngine(config=GameConfig.from_env(), rng=random.Random(args.seed))
    service = FrameService(engine=engine)

    result = engine.entry()
    raw_state = None
    print_frame(result.frame, out=out)

    while True:
        try:
            choice = input_fn("Button (q to quit): ").strip()
        except EOFError:
            break
        if choice.lower() in {"q", "quit", "exit"}:
            break
        if not choice.isdigit():
            print("Enter a button number", file=out)
            continue

        state = service.codec.decode(raw_state)
        result = engine.step(state, int(choice))
        raw_state = service.codec.encode(result.state)

        for change in result.changes:
            print(f"  * {change}", file=out)
        if result.state.in_game and not result.state.game_over:
            remaining = engine.remaining(result.state.start_time)
            print(f"  {remaining:.0f}s left", file=out)
        print_frame(result.frame, out=out)

    print("Bye!", file=out)


if __name__ == "__main__":
    main()
