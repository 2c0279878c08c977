# lanegame

A small 2D game framework built on pygame, with a lane-defence scene and a sandbox scene.

Circle entities move in a direction or towards a target point. They detect overlaps and
push other solid bodies away. Entity behaviour can be driven by a finite state machine
built from actions, transitions and conditions.

## Modules

- `lanegame.utils`: vector helpers.
  - `normalize(x, y)` returns the unit vector, or `None` for a zero vector.
  - `get_distance(x1, y1, x2, y2)` truncates coordinates to whole numbers before measuring.
  - `get_angle_degree(v1, v2)` returns the signed angle in degrees.
- `lanegame.fsm`: `StateMachine`, `Action`, `Transition` and `Condition`.
  - `StateMachine.create_action(action_cls, state)` registers the action for a state.
  - `set_state(state)` switches states.
  - `update()` runs the current action, then follows the first transition whose
    conditions all pass.
  - `Transition.add_condition(condition_cls, expected=True)` attaches a condition that
    must return `expected`.
- `lanegame.entity`: `Entity`, a circle with a position, direction, speed, tag and
  optional target.
  - `go_to_position(x, y, speed)` moves the entity to a point and stops it there.
  - `set_direction(x, y, speed)` sets a direction of travel.
  - `is_colliding`, `is_inside` and `repulse` handle overlap.
  - Subclasses override `on_initialize`, `on_update`, `on_collision` and `on_destroy`.
- `lanegame.scene`: `Scene`, the abstract base for a scene. Subclasses implement
  `on_initialize`, `on_event` and `on_update`.
  - `create_entity(entity_cls, radius, color)` creates an entity. The entity joins the
    world at the end of the next frame update.
- `lanegame.game_manager`: `GameManager`, the shared instance returned by
  `GameManager.get()`. It owns the window, the entity list and the loop.
  - `create_window` opens the window.
  - `launch_scene` starts a scene and runs until the window is closed.
  - `start_scene` initialises a scene without running the loop.
  - Each call to `update()` advances entities, removes destroyed ones, resolves collisions
    and adds newly created entities.
- `lanegame.debug`: `Debug`, which queues lines, rectangles, circles and text. The queue
  is drawn over the next frame and then emptied.
- `lanegame.pvz_scene`: the lane-defence scene `PVZScene`, with `Plant`, `Zombie` and
  `Projectile`.
- `lanegame.sample_scene`: `SampleScene`, with two solid `DummyEntity` bodies.
- `lanegame.app`: the command line entry point.

## Installing

```
pip install .
```

To install with the test tools:

```
pip install .[test]
```

## Running

```
lanegame
```

This opens a 1280×720 window at 60 frames per second and runs the lane-defence scene.

Options:

- `--scene {pvz,sample}` chooses the scene. The default is `pvz`.
- `--width N` and `--height N` set the window size.
- `--fps N` sets the frame-rate limit.

All three numbers must be positive integers.

Text is drawn with `Hack-Regular.ttf` if that file is in the current directory. Otherwise
pygame's default font is used.

### Lane-defence scene

Five lanes run down the window, each with a plant at its left end. The lanes are outlined
in red.

Clicking inside a lane spawns a zombie at the click position, centred vertically in that
lane. The zombie walks left at 50 pixels per second. It is removed when a projectile or
the plant hits it.

Each plant works as follows:

- It holds 6 shots.
- While a zombie is in its lane, it fires one projectile per second, and the first shot
  comes immediately.
- When it runs out of shots, it reloads for 2 seconds.
- When its lane is empty and it is not full, it also reloads.

Projectiles fly right at 100 pixels per second. They disappear when they hit a zombie or
leave the window.

Above each plant its current state (Idle, Shooting or Reloading) is shown, and on the
plant its ammunition count.

### Sandbox scene

- Right-click inside a body to select it. The selected body is marked with a blue dot.
- Left-click to send the selected body to that point at 100 pixels per second.

The two bodies push each other apart when they overlap. Each collision is reported on
standard output.

## Writing your own scene

```python
from lanegame.game_manager import GameManager
from lanegame.scene import Scene
from lanegame.sample_scene import DummyEntity


class MyScene(Scene):
    def on_initialize(self):
        body = self.create_entity(DummyEntity, 40, (255, 0, 0))
        body.set_position(200, 200)

    def on_event(self, event):
        pass

    def on_update(self):
        pass


manager = GameManager.get()
manager.create_window(1280, 720, "My scene")
manager.launch_scene(MyScene)
```

## What it does not do

The lane-defence scene has no score and no win or loss condition. Zombies that pass the
plants simply walk off the left edge of the window. There is no sound, and no game state
is saved.

## Tests

```
pip install .[test]
pytest
```