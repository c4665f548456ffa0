"""Trash bags that fall down the road and the manager that spawns them."""

from __future__ import annotations

import random

import pygame

from trashdodge.objects import GameObject, Sprite

OBSTACLE_SCALE = (0.09, 0.09)
SPAWN_MARGIN = 40.0


class Obstacle(GameObject):
    """A single stationary obstacle sprite."""

    def __init__(self, texture, window_size, spawn_interval, speed, scale):
        super().__init__(texture, window_size, speed)
        self.spawn_interval = spawn_interval
        self.scale = pygame.Vector2(scale)
        self.sprite = Sprite(texture, (0.0, 0.0), self.scale)
        self.width, self.height = self.sprite.size

    def update(self):
        """Obstacles on their own do not move."""

    def draw(self, surface):
        self.sprite.draw(surface)

    def set_position(self, position):
        self.sprite.position = position


class ObstacleManager:
    """Spawns obstacles at random x positions and scrolls them off screen."""

    def __init__(self, texture, window_size, spawn_interval, speed, rng=None):
        self.texture = texture
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.spawn_interval = float(spawn_interval)
        self.speed = float(speed)
        self.last_spawn_time = 0.0
        self.obstacles = []
        self._rng = rng if rng is not None else random.Random()

    def update(self, dt):
        """Spawn when the interval has elapsed, then scroll and drop off-screen ones."""
        self.last_spawn_time += dt
        if self.last_spawn_time >= self.spawn_interval:
            self._spawn()
            self.last_spawn_time = 0.0

        for sprite in self.obstacles:
            sprite.move((0.0, self.speed))
        window_height = self.window_size[1]
        self.obstacles = [s for s in self.obstacles if s.position.y <= window_height]

    def draw(self, surface):
        for sprite in self.obstacles:
            sprite.draw(surface)

    def _spawn(self):
        sprite = Sprite(self.texture, (0.0, 0.0), OBSTACLE_SCALE)
        width, height = sprite.size
        min_x = SPAWN_MARGIN
        max_x = max(min_x, self.window_size[0] - width - SPAWN_MARGIN)
        x = min_x + self._rng.random() * (max_x - min_x)
        sprite.position = (x, -height)
        self.obstacles.append(sprite)