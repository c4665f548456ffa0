"""The player's car, steered with the arrow keys inside the road."""

from __future__ import annotations

import pygame

from trashdodge.objects import GameObject, Sprite

LEFT_BOUND = 100.0
RIGHT_BOUND = 400.0
TOP_BOUND = 0.0
BOTTOM_GAP = 10.0


class Car(GameObject):
    """Player car that starts centred at the bottom of the window."""

    def __init__(self, texture, window_size, speed):
        super().__init__(texture, window_size, speed)
        self.sprite = Sprite(texture)
        width, height = self.sprite.size
        window_width, window_height = self.window_size
        self.sprite.position = (
            (window_width - width) / 2.0,
            window_height - height - BOTTOM_GAP,
        )
        self.movement = pygame.Vector2(0.0, 0.0)

    def update(self, keys=frozenset()):
        """Move according to the pressed key codes, then clamp to the road."""
        self.movement = pygame.Vector2(0.0, 0.0)
        if pygame.K_LEFT in keys:
            self.movement.x -= self.speed
        if pygame.K_RIGHT in keys:
            self.movement.x += self.speed
        if pygame.K_UP in keys:
            self.movement.y -= self.speed
        if pygame.K_DOWN in keys:
            self.movement.y += self.speed
        self.sprite.move(self.movement)
        self._check_bounds()

    def _check_bounds(self):
        width, height = self.sprite.size
        bottom_bound = self.window_size[1] - height
        x, y = self.sprite.position
        if x < LEFT_BOUND:
            x = LEFT_BOUND
        if x + width > RIGHT_BOUND:
            x = RIGHT_BOUND - width
        if y < TOP_BOUND:
            y = TOP_BOUND
        if y > bottom_bound:
            y = bottom_bound
        self.sprite.position = (x, y)

    def draw(self, surface):
        self.sprite.draw(surface)

    def check_collision(self, obstacles):
        """Return the obstacle sprites the car currently overlaps."""
        return [obs for obs in obstacles.obstacles if self.sprite.intersects(obs)]