# trashdodge

A small top-down driving game. The road scrolls beneath your car while
trash bags fall toward you from the top of the screen; steer around them.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.

## Playing

```
trashdodge
```

The game opens a 500 × 600 window titled "Top Down Driving Game" and runs
at up to 60 frames per second.

- **Arrow keys** move the car left, right, up and down, 5 pixels per frame.
- The car is held between x = 100 and x = 400, and cannot leave the top or
  bottom of the window.
- The road scrolls down 4 pixels per frame and wraps round endlessly.
- A new trash bag appears once a second at a random x position, at least
  40 pixels in from either side of the window, just above its top edge. Bags
  move down 4 pixels per frame and are removed once they fall below the
  window.
- While the car overlaps a bag, "Car Crashed!" is printed to standard
  output, once per overlapping bag on every frame.
- Close the window to quit.

### Images

The game loads three pictures from an assets directory, `images/` under
the working directory by default:

- `car.png`
- `trash bag.png`
- `top down road 1.png`

Point the game at another directory with `--assets`:

```
trashdodge --assets path/to/images
```

If any of the pictures is missing, the command prints
`texture not found: <path>` to standard error and exits with status 1.
The pictures are not included in the package.

## What the game does not do

There is no menu, no score and no end screen. Hitting a bag does not stop
or slow the game; it only prints the message above. The car's colour
cannot be changed.

## Using the pieces

The modules can be used on their own:

- `trashdodge.objects`: `Sprite`, an image with a `position` and a
  per-axis `scale`, offering `size`, `move(offset)`, `bounds()` (left,
  top, width, height), `intersects(other)` and `draw(surface)`; and
  `GameObject`, the abstract base for things with `update()` and
  `draw(surface)`.
- `trashdodge.background`: `Background(texture, window_size, scale,
  scroll_speed)`, two copies of the road image that scroll down and
  leapfrog each other.
- `trashdodge.obstacles`: `Obstacle`, a single stationary sprite with
  `set_position`; and `ObstacleManager(texture, window_size,
  spawn_interval, speed, rng=None)`, which spawns, moves and removes the
  trash bags in `update(dt)` and keeps them in its `obstacles` list. Pass
  a seeded `random.Random` as `rng` to get the same spawn positions every
  time.
- `trashdodge.car`: `Car(texture, window_size, speed)`, the player's car.
  `update(keys)` takes a collection of pygame key codes, moves the car for
  the arrow keys among them and clamps it to the road;
  `check_collision(obstacles)` returns the manager's sprites the car
  overlaps.
- `trashdodge.game`: `GameConfig` (window size, title, frame rate, speeds,
  background scale, assets directory and image names), `load_texture(path)`,
  `run(config=None)` and `main(argv=None)`.

## Running the tests

```
pip install .[test]
pytest
```