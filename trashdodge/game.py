"""Game setup and main loop for the top-down trash-dodging driving game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from trashdodge.background import Background
from trashdodge.car import Car
from trashdodge.obstacles import ObstacleManager


@dataclass
class GameConfig:
    """Window, speeds and image locations for one game session."""

    window_size: tuple = (500, 600)
    title: str = "Top Down Driving Game"
    fps: int = 60
    spawn_interval: float = 1.0
    obstacle_speed: float = 4.0
    car_speed: float = 5.0
    bg_scale: tuple = (2.0, 4.0)
    scroll_speed: float = 4.0
    assets_dir: Path = Path("images")
    obstacle_image: str = "trash bag.png"
    car_image: str = "car.png"
    background_image: str = "top down road 1.png"


def load_texture(path):
    """Load an image file into a surface; raise FileNotFoundError if it is missing."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"texture not found: {path}")
    return pygame.image.load(str(path))


_ARROWS = (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN)


def _pressed_arrows():
    pressed = pygame.key.get_pressed()
    return {key for key in _ARROWS if pressed[key]}


def run(config=None):
    """Open the window and play until it is closed."""
    config = config or GameConfig()
    assets = Path(config.assets_dir)
    obstacle_texture = load_texture(assets / config.obstacle_image)
    car_texture = load_texture(assets / config.car_image)
    bg_texture = load_texture(assets / config.background_image)

    pygame.init()
    try:
        screen = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption(config.title)

        obstacles = ObstacleManager(
            obstacle_texture, config.window_size, config.spawn_interval, config.obstacle_speed
        )
        car = Car(car_texture, config.window_size, config.car_speed)
        background = Background(
            bg_texture, config.window_size, config.bg_scale, config.scroll_speed
        )

        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(config.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            car.update(_pressed_arrows())
            background.update()
            obstacles.update(dt)

            screen.fill((0, 0, 0))
            background.draw(screen)
            obstacles.draw(screen)
            car.draw(screen)
            pygame.display.flip()

            for _ in car.check_collision(obstacles):
                print("Car Crashed!")
    finally:
        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Top-down driving game: dodge the trash.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=GameConfig.assets_dir,
        help="directory holding the game images",
    )
    args = parser.parse_args(argv)
    try:
        run(GameConfig(assets_dir=args.assets))
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())