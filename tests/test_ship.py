import pytest

from spaceinvaders.gameobject import ObjectType, UpdateContext
from spaceinvaders.position import Position
from spaceinvaders.projectiles import PlayerLaserProjectile, Projectile
from spaceinvaders.ship import Ship, ShipWithHealthBar
from spaceinvaders.weapons import PrimaryWeapon, SecondaryWeapon


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class Fighter(Ship):
    def initialize_sounds(self):
        pass

    def clone(self):
        return Fighter(self.max_health, self.speed, self.position)


class BarFighter(ShipWithHealthBar):
    def initialize_sounds(self):
        pass

    def clone(self):
        return BarFighter(self.max_health, self.speed, self.position)


def make_position():
    return Position(100, 100, 0, 800, 0, 600)


def make_ship(hp=5, clock=None):
    ship = Fighter(hp, 100, make_position(), clock=clock or FakeClock())
    ship.initialize()
    return ship


def make_weapon(weapon_type=PrimaryWeapon, clock=None):
    weapon = weapon_type(clock or FakeClock())
    weapon.projectile_prototype = PlayerLaserProjectile()
    return weapon


def test_take_damage_reduces_and_clamps_at_zero():
    ship = make_ship(hp=5)
    ship.take_damage(2)
    assert ship.current_health == 3
    assert not ship.is_dead()
    ship.take_damage(10)
    assert ship.current_health == 0
    assert ship.is_dead()


def test_immortal_ship_ignores_damage():
    ship = make_ship(hp=5)
    ship.immortal = True
    ship.take_damage(4)
    assert ship.current_health == 5


def test_heal_clamps_to_max_and_skips_dead_ship():
    ship = make_ship(hp=5)
    ship.take_damage(1)
    ship.heal(10)
    assert ship.current_health == ship.max_health
    ship.kill()
    ship.heal(2)
    assert ship.current_health == 0


def test_restore_health_after_kill():
    ship = make_ship(hp=5)
    ship.kill()
    assert ship.is_dead()
    ship.restore_health()
    assert ship.current_health == ship.max_health
    assert ship.current_hp == 5


def test_regenerate_energy_clamps_to_max():
    ship = make_ship()
    ship.max_energy = 10
    ship.energy_regeneration_rate = 4
    ship.regenerate_energy(1.0)
    assert ship.current_energy == 4
    ship.regenerate_energy(5.0)
    assert ship.current_energy == ship.max_energy


def test_fully_restore_energy():
    ship = make_ship()
    ship.max_energy = 7
    ship.fully_restore_energy()
    assert ship.current_energy == 7


def test_object_types_include_ship():
    ship = make_ship()
    assert ship.object_types == {ObjectType.BASE, ObjectType.SHIP}


def test_destruction_setup_from_explosion_sheet():
    ship = make_ship()
    assert ship.destruction_animation.frame_count == 16
    assert ship.destruction_animation.frame_size == (50, 50)
    assert ship.destruction_animation.frame_offsets[0] == (0, 0)
    assert len(ship.destruction_effect.particles) == 200


def test_primary_weapons_emit_projectiles_through_ship():
    ship = make_ship()
    created = []
    ship.object_created.connect(created.append)
    ship.add_primary_weapon(make_weapon())
    ship.add_primary_weapon(make_weapon())
    ship.fire_primary_weapons()
    assert len(created) == 2
    assert all(isinstance(p, Projectile) for p in created)


def test_add_primary_weapon_sets_owner():
    ship = make_ship()
    weapon = make_weapon()
    ship.add_primary_weapon(weapon)
    assert weapon.owner is ship


def test_update_fire_rate_changes_cooldowns_with_minimum():
    ship = make_ship()
    weapon = make_weapon()
    weapon.cooldown_ms = 500
    ship.add_primary_weapon(weapon)
    ship.update_fire_rate(200)
    assert weapon.cooldown_ms == 700
    ship.update_fire_rate(-99999)
    assert weapon.cooldown_ms == weapon.min_cooldown_ms


def test_fire_secondary_weapon_consumes_energy():
    ship = make_ship()
    ship.max_energy = 10
    ship.fully_restore_energy()
    created = []
    ship.object_created.connect(created.append)
    weapon = make_weapon(SecondaryWeapon)
    weapon.energy_consumption = 4
    ship.set_secondary_weapon(weapon, 1)
    assert ship.fire_secondary_weapon(1) is True
    assert ship.current_energy == 6
    assert len(created) == 1


def test_fire_secondary_weapon_without_enough_energy():
    ship = make_ship()
    ship.max_energy = 3
    ship.fully_restore_energy()
    weapon = make_weapon(SecondaryWeapon)
    weapon.energy_consumption = 4
    ship.set_secondary_weapon(weapon, 0)
    assert ship.fire_secondary_weapon(0) is False
    assert ship.current_energy == 3


def test_fire_secondary_weapon_during_cooldown_keeps_energy():
    clock = FakeClock()
    ship = make_ship()
    ship.max_energy = 10
    ship.fully_restore_energy()
    weapon = make_weapon(SecondaryWeapon, clock)
    weapon.energy_consumption = 2
    ship.set_secondary_weapon(weapon, 2)
    assert ship.fire_secondary_weapon(2) is True
    assert ship.fire_secondary_weapon(2) is False
    assert ship.current_energy == 8


def test_fire_secondary_weapon_bad_slots():
    ship = make_ship()
    assert ship.fire_secondary_weapon(0) is False
    assert ship.fire_secondary_weapon(4) is False


def test_set_secondary_weapon_rejects_bad_slot():
    ship = make_ship()
    with pytest.raises(IndexError):
        ship.set_secondary_weapon(make_weapon(SecondaryWeapon), 4)


def test_clear_weapons_disconnects_everything():
    ship = make_ship()
    created = []
    ship.object_created.connect(created.append)
    primary = make_weapon()
    secondary = make_weapon(SecondaryWeapon)
    ship.add_primary_weapon(primary)
    ship.set_secondary_weapon(secondary, 3)
    ship.clear_weapons()
    assert ship.primary_weapons == []
    assert ship.secondary_weapons == [None, None, None, None]
    primary.fire()
    assert created == []


def test_auto_fire_on_update():
    ship = make_ship()
    created = []
    ship.object_created.connect(created.append)
    ship.add_primary_weapon(make_weapon())
    ship.auto_fire = True
    ship.update(UpdateContext(delta_time=0.0))
    assert len(created) == 1


def test_on_hit_animation_ends_after_duration():
    clock = FakeClock()
    ship = make_ship(clock=clock)
    ship.pixmap_data.on_hit_pixmap_resource_path = ":/Images/hit.png"
    ship.play_on_hit_animation()
    assert ship.graphics_item.pixmap_path == ":/Images/hit.png"
    assert ship.on_hit_animation_in_progress
    clock.now = 99
    ship.update(UpdateContext(delta_time=0.0))
    assert ship.on_hit_animation_in_progress
    clock.now = 100
    ship.update(UpdateContext(delta_time=0.0))
    assert not ship.on_hit_animation_in_progress
    assert ship.graphics_item.pixmap_path == ship.pixmap_path()


def test_end_on_hit_animation_restores_pixmap():
    ship = make_ship()
    ship.pixmap_data.on_hit_pixmap_resource_path = ":/Images/hit.png"
    ship.play_on_hit_animation()
    ship.end_on_hit_animation()
    assert ship.graphics_item.pixmap_path == ship.pixmap_path()
    assert not ship.on_hit_animation_in_progress


def test_should_be_deleted_rules():
    ship = make_ship()
    assert ship.should_be_deleted() is False
    ship.position.x = 2000
    assert ship.should_be_deleted() is True


def test_dead_ship_waits_for_destruction_animation():
    ship = make_ship()
    ship.kill()
    assert ship.should_be_deleted() is False


def test_health_bar_follows_damage_and_heal():
    ship = BarFighter(10, 0, make_position())
    ship.initialize()
    ship.take_damage(4)
    assert ship.health_bar.current_progress == ship.current_health
    ship.heal(2)
    assert ship.health_bar.current_progress == ship.current_health


def test_health_bar_kill_and_restore():
    ship = BarFighter(10, 0, make_position())
    ship.initialize()
    ship.kill()
    assert ship.health_bar.current_progress == 0
    ship.restore_health()
    assert ship.health_bar.current_progress == ship.health_bar.max_progress
    assert ship.current_health == ship.max_health


def test_health_bar_unchanged_for_immortal_ship():
    ship = BarFighter(10, 0, make_position())
    ship.initialize()
    ship.immortal = True
    ship.take_damage(4)
    assert ship.health_bar.current_progress == ship.health_bar.max_progress


def test_health_bar_requires_initialize():
    ship = BarFighter(10, 0, make_position())
    with pytest.raises(RuntimeError):
        ship.take_damage(1)