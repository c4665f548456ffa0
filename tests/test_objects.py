import pygame
import pytest

from trashdodge.objects import GameObject, Sprite


def _texture(width, height, color=(255, 0, 0)):
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


def test_bounds_follow_position_and_scale():
    sprite = Sprite(_texture(10, 20), (5, 7), (2, 3))
    left, top, width, height = sprite.bounds()
    assert (left, top) == (5, 7)
    assert width == 10 * 2
    assert height == 20 * 3


def test_move_accumulates_offsets():
    sprite = Sprite(_texture(4, 4), (1, 1))
    sprite.move((2, 3))
    sprite.move((-1, 4))
    assert tuple(sprite.position) == (2, 8)


def test_position_setter_accepts_tuple():
    sprite = Sprite(_texture(4, 4))
    sprite.position = (9, 11)
    sprite.move((1, 1))
    assert tuple(sprite.position) == (10, 12)


def test_overlapping_sprites_intersect():
    a = Sprite(_texture(10, 10), (0, 0))
    b = Sprite(_texture(10, 10), (5, 5))
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Sprite(_texture(10, 10), (0, 0))
    b = Sprite(_texture(10, 10), (10, 0))
    assert not a.intersects(b)


def test_distant_sprites_do_not_intersect():
    a = Sprite(_texture(10, 10), (0, 0))
    b = Sprite(_texture(10, 10), (50, 50))
    assert not a.intersects(b)


def test_draw_paints_scaled_texture():
    red = (255, 0, 0)
    sprite = Sprite(_texture(2, 2, red), (4, 4), (3, 3))
    target = pygame.Surface((20, 20))
    target.fill((0, 0, 0))
    sprite.draw(target)
    assert tuple(target.get_at((4, 4)))[:3] == red
    assert tuple(target.get_at((9, 9)))[:3] == red
    assert tuple(target.get_at((10, 10)))[:3] == (0, 0, 0)


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject(_texture(1, 1), (10, 10), 1.0)