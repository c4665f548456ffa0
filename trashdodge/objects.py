"""Sprites and the base class for everything that updates and draws each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame


class Sprite:
    """A texture placed at a position and stretched by a per-axis scale."""

    def __init__(self, texture, position=(0.0, 0.0), scale=(1.0, 1.0)):
        self.texture = texture
        self._position = pygame.Vector2(position)
        self.scale = pygame.Vector2(scale)
        self._scaled_surface = None
        self._scaled_size = None

    @property
    def position(self):
        """Top-left corner of the sprite."""
        return self._position

    @position.setter
    def position(self, value):
        self._position = pygame.Vector2(value)

    @property
    def size(self):
        """Width and height after scaling."""
        width, height = self.texture.get_size()
        return pygame.Vector2(width * self.scale.x, height * self.scale.y)

    def move(self, offset):
        """Shift the sprite by the given offset."""
        self._position += pygame.Vector2(offset)

    def bounds(self):
        """Return the on-screen rectangle as (left, top, width, height)."""
        size = self.size
        return (self._position.x, self._position.y, size.x, size.y)

    def intersects(self, other):
        """True when the two sprites overlap by a non-empty area."""
        left, top, width, height = self.bounds()
        o_left, o_top, o_width, o_height = other.bounds()
        overlap_x = max(left, o_left) < min(left + width, o_left + o_width)
        overlap_y = max(top, o_top) < min(top + height, o_top + o_height)
        return overlap_x and overlap_y

    def draw(self, surface):
        """Blit the scaled texture onto the surface."""
        size = self.size
        target = (max(0, round(size.x)), max(0, round(size.y)))
        if self._scaled_surface is None or self._scaled_size != target:
            if target == tuple(self.texture.get_size()):
                self._scaled_surface = self.texture
            else:
                self._scaled_surface = pygame.transform.scale(self.texture, target)
            self._scaled_size = target
        surface.blit(self._scaled_surface, (round(self._position.x), round(self._position.y)))


class GameObject(ABC):
    """Something in the game world that owns a texture and moves at a speed."""

    def __init__(self, texture, window_size, speed):
        self.texture = texture
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.speed = float(speed)

    @abstractmethod
    def update(self):
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, surface):
        """Draw the object onto the surface."""