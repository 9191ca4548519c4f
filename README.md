# spaceinvaders

The game-object model of a vertical space shooter, in plain Python with no
dependencies. It covers ships, weapons, projectiles, collectables, particle
effects, progress bars and HUD counters, plus a frame-time benchmark that
writes a CSV file. A front end is expected to draw these objects and call
their `update` methods once per frame.

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

- `spaceinvaders.position`: `Vec2` (an immutable vector with `length` and
  `normalized`), `Rect` (with `center` and `intersects`) and `Position`, a
  point with an anchor and screen bounds. A `Position` can be tested against
  its bounds (`is_beyond_top`, `is_beyond_any`, `is_beyond_limits`, ...) and
  moved onto them (`go_to_left_limit`, ...).
- `spaceinvaders.mathutils`: `PI` and `percentile`, a linearly interpolated
  percentile that returns 0.0 for empty input.
- `spaceinvaders.utils`: `lerp`, `randi` (inclusive range), `probability_check`
  (raises `ValueError` outside [0, 1]) and `timestamp_str`.
- `spaceinvaders.gameobject`: the abstract `GameObject` base class together
  with `ObjectType`, `Magnetism`, `UpdateContext`, `PixmapData`, `SoundInfo`,
  `GraphicsItem`, the `MovementStrategy` protocol,
  `StationaryMovementStrategy` and `Signal`, a list of callbacks with
  `connect`, `disconnect` and `emit`. Collisions between two objects are
  handled once per pair through `collide`.
- `spaceinvaders.attractable`: `AttractableGameObject`. It drifts towards
  magnetic objects of its target types when they are within their magnetic
  radius.
- `spaceinvaders.projectiles`: `Projectile`, `EnemyProjectile`,
  `PlayerProjectile`, `EnemyLaserProjectile`, `PlayerLaserProjectile`,
  `Vortex` (turns into a magnetic black hole when it hits an enemy ship and
  lasts 5 seconds), `WaveOfDestruction`, `ProjectileProperty`, and the
  fluent `ProjectileBuilder`.
- `spaceinvaders.weapons`: `PrimaryWeapon`, `SecondaryWeapon` and
  `WeaponBuilder`. A weapon fires clones of its projectile prototype, never
  more often than its cooldown allows (at least 100 ms).
- `spaceinvaders.collectables`: `Health`, `Stellar` coins and `StellarPool`,
  a first-in first-out pool of reusable coins. Collectables scatter when they
  appear, are drawn to the player ship, blink near the end of their 30-second
  life and then expire.
- `spaceinvaders.ship`: `Ship` (health, energy, primary weapons and four
  secondary weapon slots) and `ShipWithHealthBar`.
- `spaceinvaders.enemy_ship`: `EnemyShip`. It drops stellar coins and, at a
  given probability, a health pickup when it is destroyed.
- `spaceinvaders.player_ship`: `PlayerShip`, with inertial steering kept
  within the screen bounds, energy regeneration and pickup of collectables.
- `spaceinvaders.ship_builder`: the fluent `ShipBuilder`.
- `spaceinvaders.bars`: `ProgressBar`, `HealthBar` (red, orange or green by
  fill level) and `EnergyBar`.
- `spaceinvaders.counters`: `FPSCounter` and `GameObjectCounter`, which hold
  the text to display.
- `spaceinvaders.cooldown`: `CooldownItem`, the state of a cooldown overlay
  on a HUD icon.
- `spaceinvaders.particles`: `Particle` and `ParticleSystem`.
- `spaceinvaders.animation`: `AnimatedItem`, which steps through sprite-sheet
  frame offsets.
- `spaceinvaders.registry`: `PixmapRegistry`, a list of preload callbacks
  run by `preload_all`.
- `spaceinvaders.benchmark`: `PerformanceBenchmark` and `memory_usage_mb`.
  The benchmark records frame times and `log_performance_score` appends
  average, minimum, 95th and 99th percentile FPS and memory use to
  `benchmark_scores.csv` (by default in `./performance`). The first 100
  frames and frames over 1000 ms are left out.

Timing-dependent classes (`Weapon`, `Ship` and its subclasses,
`AnimatedItem`, `CooldownItem`) accept a `clock` callable that returns
milliseconds. Classes that use randomness (`Collectable`, `EnemyShip`,
`ParticleSystem`) accept an `rng`. Both make them easy to drive in tests.

## Example

```python
from spaceinvaders.position import Position
from spaceinvaders.bars import HealthBar
from spaceinvaders.projectiles import ProjectileBuilder, PlayerLaserProjectile
from spaceinvaders.weapons import WeaponBuilder, PrimaryWeapon

pos = Position(10, 20, 0, 800, 0, 600)
pos.is_beyond_any(0)        # False
pos.go_to_right_limit()     # pos.x is now 800

bar = HealthBar(10, 50, 5)
bar.update_progress(-8)
bar.select_color()          # (211, 82, 105), the low-health colour

laser = (
    ProjectileBuilder()
    .create_projectile(PlayerLaserProjectile)
    .with_damage(3)
    .build()
)
laser.damage                # 3

weapon = (
    WeaponBuilder()
    .create_weapon(PrimaryWeapon)
    .with_projectile(laser)
    .with_weapon_cooldown_ms(50)
    .build()
)
weapon.cooldown_ms          # 100.0, the minimum cooldown
```

## What this package does not do

- It draws nothing and opens no window. Sprites are image paths and sizes in
  `PixmapData` and `GraphicsItem`. No images are loaded.
- It plays no sound. A game object emits its `sound_requested` signal with a
  `SoundInfo` for a front end to play.
- It has no menus, levels, enemy formations or game loop, and no command to
  run. `StationaryMovementStrategy` is the only movement strategy it provides.
  Other strategies can be supplied through the `MovementStrategy` protocol.
- `memory_usage_mb` relies on the `resource` module and returns 0.0 where that
  module is not available.