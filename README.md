# ringrun

The rules of a tile-based side-scrolling platformer, with no graphics, sound or
input handling. A front end reads the keyboard, draws the screen and calls into
this package each frame to move characters, check the grid and keep score.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ringrun.grid`
  - `Cell` is an enum of tile kinds: `EMPTY`, `WALL`, `PLATFORM`, `SPIKE`,
    `BREAKABLE` and `PIT`. Their values are the letters `e`, `w`, `p`, `s`, `b`
    and `h`.
  - `ObstacleGrid(cells_x, cells_y)` starts with every cell empty. It provides
    `place(row, col, kind)`, `check(row, col, kind)` and `cell(row, col)`.
  - A kind can be given as a `Cell` or as its letter. Cells outside the grid
    raise `IndexError`.
  - Iterating over the grid yields one tuple of cells per row.
- `ringrun.timing`
  - `TimeManager(clock=None)` defaults to `time.monotonic`.
  - Each call to `update()` returns the seconds since the previous call and
    updates `delta_time` and `total_time`.
- `ringrun.players`
  - `Player` is the shared physics of a character:
    - `set_modifiers(gravity, friction)` sets the level's gravity and friction.
    - `ground_below(grid)` applies one frame of gravity. Walls, platforms and
      spikes count as ground. It also sets `on_spike`.
    - `apply_horizontal(dt, direction)` accelerates for `1` or `-1`, or slows
      down by friction for `0`. Any other value raises `ValueError`.
    - `jump()` starts a jump.
    - `move_to_target(target_x, dt, target_y)` moves the character towards a
      target, for following the active player.
    - `activate_boost()` uses the character's boost.
    - `refresh_invincibility(elapsed)` ends invincibility once `elapsed` passes
      `invincibility_time`.
    - The `rolling` property tells whether the character is rolling.
  - `Sonic` runs faster. His boost raises his top speed. While flying, he also
    follows the target vertically.
  - `Tails` can `fly(dt, elapsed)`. His boost adds four seconds to `fly_time`.
  - `player_gravity(...)` is a standalone gravity step. It checks for walls
    only and returns a `GravityStep(player_y, velocity_y, on_ground)`.
- `ringrun.motobug`: `MotoBug(x, y)` is a ground enemy. `move(dt, target_x)` and
  `update(dt, target_x)` step it towards the target at 100 pixels per second,
  unless the target is more than 600 pixels ahead of it.
- `ringrun.levels`
  - `Level` is the abstract base of a stage. It holds:
    - the obstacle grid;
    - collectibles, placed with `place_collectible` and read with
      `collectible` and `collectible_cells`;
    - enemy spawns (`EnemySpawn`, `EnemyKind`);
    - team health, collected rings, defeated enemies and the active team member.
  - `build()` lays the stage out once.
  - `collect(row, col)` picks up an item. A ring adds to the ring count and a
    health item adds one team health. The taken `Collectible` is returned.
  - `take_damage()`, `defeat_enemy()` and `switch_active_player()` update the
    team's state.
  - `is_lost(total_time, fell_in_pit)` is true when time runs out, team health
    reaches zero, or the leader fell into a pit.
  - `is_won(active_x)` is true when every enemy is defeated, every ring is
    collected and the leader has reached the end.
  - `score()` gives 200 points per enemy and 50 per ring. `total_score` adds
    the carried-over high score.
- `ringrun.level1`, `ringrun.level2`, `ringrun.level3`: the three stages, as
  `Level1`, `Level2` and `Level3`. Each takes `(volume, highscore)` and has its
  own layout, time limit, gravity, friction and enemy spawns.
- `ringrun.menu`: `Menu` moves a cursor through the `MenuOption` entries with
  `move_down()` and `move_up()`, wrapping at both ends. `select()` returns the
  highlighted option.
- `ringrun.scoreboard`
  - `NameEntry` collects a typed name of up to 15 characters. `"\b"` deletes the
    last character.
  - `Scoreboard(path)` keeps a plain-text file of `name score` pairs:
    - `load()` reads at most 50 entries.
    - `record(name, score)` adds a new name, or raises an existing name's score
      when the new score is higher.
    - `top(count=10)` returns the best scores first.
    - Names must be non-empty and contain no whitespace.

## Example

```python
from ringrun.level1 import Level1

level = Level1(volume=50, highscore=0)
level.build()
level.defeat_enemy()
print(level.score())                                      # 200
print(level.is_lost(total_time=10.0, fell_in_pit=False))  # False
```

```python
from ringrun.scoreboard import Scoreboard

board = Scoreboard("highscores.txt")
board.record("amy", 1200)
for name, score in board.top(10):
    print(name, score)
```

## What this package does not do

- There is no window, drawing, sound, camera, HUD or keyboard handling. There is
  also no command to start a game; a front end has to provide the main loop.
- Only two characters are playable: `Sonic` and `Tails`.
- `MotoBug` is the only enemy with behaviour. The other `EnemyKind` values
  (crabmeat, batbrain, beebot) are spawn positions only.
- Collision between players and enemies or projectiles is not modelled. The
  front end decides when to call `take_damage()` or `defeat_enemy()`.
- There is no saving or loading of a game in progress. The only thing stored is
  the leaderboard file.