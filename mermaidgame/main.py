"""Command that starts the game."""

from __future__ import annotations

from .game import Game, GameError


def main(argv=None):
    """Set up the game, play it and shut it down; always returns 0."""
    game = Game()
    try:
        game.init()
    except GameError as exc:
        print(exc)
        print("Failed to initialize!")
        return 0
    try:
        game.load_media()
    except GameError as exc:
        print(exc)
        print("Failed to load media!")
        return 0
    try:
        game.run()
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())