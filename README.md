# sweepworld

This package is the game-side core of a multiplayer minesweeper. It uses an
entity-component-system design and depends only on the standard library.

It provides:

- **Board and game configuration.** `sweepworld.board_config` has `BoardConfig`
  with the beginner, intermediate, expert and custom presets, and sizes cells
  to fit a canvas. `sweepworld.game_config` has `GameConfigResource` with
  `Difficulty` presets and custom boards. Its boards are clamped to at least
  5x5, with at least 9 cells left free of mines. It also sizes cells, derives
  a random seed and calculates scores.
- **Game progress.** `sweepworld.core_game` has `CoreGameResource`, which keeps
  the phase, elapsed time in milliseconds, score and remaining mines.
  `sweepworld.game_state` has `GameState`, which keeps the phase (starting at
  the title screen), elapsed seconds, frame count and average FPS.
- **Frame timing.** `sweepworld.time_resource` has `TimeResource`. It keeps the
  delta time, total time, time scale, pause state and a rolling FPS over the
  last 60 frames. It also formats times as `MM:SS.mmm`.
- **Players.** `sweepworld.player_state` has `PlayerStateResource`. It tracks
  the local and remote players' cursor positions and the mouse state. It reads
  player lists from JSON and writes them back as JSON.
- **A type-keyed resource store.** `sweepworld.resource_manager` has
  `ResourceManager`, which holds one resource per exact type. It offers read
  batches (`ResourceBatch`) and write batches (`ResourceBatchMut`).
- **System scheduling**, in three styles:
  - `sweepworld.phased_registry.SystemRegistry` runs systems phase by phase
    (startup, input, update, render, cleanup). Within a phase it orders them by
    priority, then by dependency ids. A dependency cycle is skipped silently.
  - `sweepworld.function_registry.FunctionRegistry` runs plain functions. Each
    function has a `SystemPriority` and receives a dict of named resources.
  - `sweepworld.system_registry.SystemRegistry` runs subclasses of
    `sweepworld.system_base.System`. It orders them by declared dependencies and
    by the resources they read and write. The same module family also offers:
    - named `SystemGroup`s (`sweepworld.system_group`)
    - level-by-level execution (`sweepworld.parallel_executor.ParallelExecutor`)
    - `ReadResource`, `WriteResource`, `ResourceSet` and `NoResources`
      declarations (`sweepworld.resource_dependency`)
    - a fixed-rate `SystemScheduler` and a rate-limiting
      `RateControlledSystem` (`sweepworld.system_scheduler`)

Times come from a clock that returns milliseconds. Most classes take a
`clock` argument, so tests can supply a fake one.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

```python
from sweepworld.game_config import Difficulty, GameConfigResource
from sweepworld.core_game import CoreGameResource
from sweepworld.resource_manager import ResourceManager

config = GameConfigResource()
config.set_difficulty(Difficulty.MEDIUM)

game = CoreGameResource()
game.initialize(config.board_config.mine_count)
game.start_game()

resources = ResourceManager()
resources.insert(config)
resources.insert(game)
assert resources.get(CoreGameResource).is_playing()
```

## Writing systems

1. Subclass `sweepworld.system_base.System`, give it a `name` and implement
   `update(context, delta_time)`.
2. Optionally override any of these:
   - `dependencies()`, which returns the names of systems that must run first
   - `read_resources()` and `write_resources()`
   - `priority()`
   - `is_runnable()`
3. Register the system with `SystemRegistry.register`. Alternatively, use
   `register_with_deps` together with a `ResourceDependency`.

`SystemRegistry.update_all` resolves the execution order on first use and
again after each new registration. A cycle or an unknown dependency name
raises `ValueError`.

`SystemRegistry.update_group` raises `KeyError` for an unknown group.
`SystemScheduler.update` runs these groups, in this order:

1. `VariableUpdate`
2. `FixedUpdate`, stepped at the fixed rate
3. `PreRender`
4. `Render`
5. `PostRender`

All five groups must be registered.

## What this package does not do

This package only holds state and schedules logic. It does not contain:

- the minesweeper board itself: mine placement, cell reveal, flagging and the
  win check
- any rendering
- input handling
- network transport
- a command-line program

Those belong to the application that uses these resources and systems.

## Running the tests

```
pytest
```