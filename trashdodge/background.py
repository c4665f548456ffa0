"""Endlessly scrolling road made of two stacked copies of one texture."""

from __future__ import annotations

import pygame

from trashdodge.objects import GameObject, Sprite


class Background(GameObject):
    """Two copies of the road that leapfrog each other to fake motion."""

    def __init__(self, texture, window_size, scale, scroll_speed):
        super().__init__(texture, window_size, scroll_speed)
        self.scale = pygame.Vector2(scale)
        self.bg_height = texture.get_size()[1] * self.scale.y
        self.sprites = (
            Sprite(texture, (0.0, 0.0), self.scale),
            Sprite(texture, (0.0, self.bg_height), self.scale),
        )

    def update(self):
        """Scroll down; a copy that leaves the window jumps above the other."""
        first, second = self.sprites
        first.move((0, self.speed))
        second.move((0, self.speed))
        window_height = self.window_size[1]
        if first.position.y >= window_height:
            first.position = (0, second.position.y - self.bg_height)
        if second.position.y >= window_height:
            second.position = (0, first.position.y - self.bg_height)

    def draw(self, surface):
        for sprite in self.sprites:
            sprite.draw(surface)