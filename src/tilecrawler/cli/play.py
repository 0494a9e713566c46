from __future__ import annotations

import argparse
import importlib.metadata
import os
import platform
import sys
from typing import Sequence

from tilecrawler.cli.pygame_display import PygameDisplay, _ensure_pygame_imported
from tilecrawler.content.config import GameConfig, load_game_config_json
from tilecrawler.sim.core import GameLoop, build_session
from tilecrawler.sim.world import map_generator_names

HEADLESS_ENV_VAR = "TILECRAWLER_HEADLESS"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tilecrawler", description="Run the Tilecrawler play view.")
    parser.add_argument("--config", help="Optional JSON file overriding the default game settings.")
    parser.add_argument(
        "--map-generator",
        choices=map_generator_names(),
        help="Map generator used to build the world.",
    )
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen mode.")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Force SDL dummy video driver, render one frame and exit without waiting for input.",
    )
    return parser


def _env_flag_enabled(var_name: str) -> bool:
    return os.environ.get(var_name, "").strip().lower() in {"1", "true", "yes", "on"}


def _print_startup_banner() -> None:
    try:
        pygame_version = importlib.metadata.version("pygame")
    except importlib.metadata.PackageNotFoundError:
        pygame_version = "not-installed"
    print(
        "[tilecrawler.play] startup "
        f"python={platform.python_version()} "
        f"pygame={pygame_version} "
        f"platform={platform.platform()}"
    )
    for name in ("SDL_VIDEODRIVER", "SDL_AUDIODRIVER"):
        value = os.environ.get(name, "<unset>")
        print(f"[tilecrawler.play] env {name}={value}")


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = load_game_config_json(args.config) if args.config else GameConfig()
    return config.with_overrides(
        map_generator=args.map_generator,
        fullscreen=True if args.fullscreen else None,
    )


def run_game(config: GameConfig, *, headless: bool = False) -> int:
    if headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        print("[tilecrawler.play] warning: headless mode active; no window will open.")

    _print_startup_banner()
    pygame_module = _ensure_pygame_imported()

    try:
        pygame_module.init()
    except Exception as exc:
        print(
            "[tilecrawler.play] failed during pygame.init(): "
            f"{exc}. Hint: set SDL_VIDEODRIVER=dummy or pass --headless when no display is available.",
            file=sys.stderr,
        )
        return 1

    try:
        session = build_session(config)
    except ValueError as exc:
        print(f"[tilecrawler.play] failed to build session: {exc}", file=sys.stderr)
        pygame_module.quit()
        return 1

    try:
        display = PygameDisplay(
            config.screen_width,
            config.screen_height,
            title=config.title,
            font=config.font,
            font_type=config.font_type,
            tile_size=config.tile_size,
            fullscreen=config.fullscreen,
        )
    except (pygame_module.error, OSError) as exc:
        print(f"[tilecrawler.play] failed to open display: {exc}", file=sys.stderr)
        pygame_module.quit()
        return 1

    loop = GameLoop(display, session, limit_fps=config.limit_fps)
    try:
        if headless:
            loop.render()
            print(f"[tilecrawler.play] headless frame rendered map={config.map_width}x{config.map_height}")
            return 0
        frames = loop.run()
        player = session.player
        print(f"[tilecrawler.play] exited frames={frames} player=({player.x},{player.y})")
        return 0
    finally:
        display.close()
        pygame_module.quit()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    headless = args.headless or _env_flag_enabled(HEADLESS_ENV_VAR)
    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        print(f"[tilecrawler.play] invalid config: {exc}", file=sys.stderr)
        return 1
    return run_game(config, headless=headless)


if __name__ == "__main__":
    raise SystemExit(main())
