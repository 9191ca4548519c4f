"""Weapons that fire clones of a projectile prototype, and a weapon builder."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from .gameobject import Signal
from .position import Vec2
from .projectiles import BuilderError, Projectile, ProjectileProperty

MIN_COOLDOWN_MS = 100.0


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Weapon(ABC):
    """Fires projectiles on behalf of its owner, no faster than its cooldown."""

    def __init__(self, clock: Callable[[], float] = _monotonic_ms) -> None:
        self.owner: Any = None
        self.sound_enabled = True
        self.energy_consumption = 0
        self.min_cooldown_ms = MIN_COOLDOWN_MS
        self.projectile_prototype: Projectile | None = None
        self.projectile_fired = Signal()
        self._cooldown_ms = 0.0
        self._clamp_cooldown()
        self._clock = clock
        self._last_fired = clock()
        self._first_shot = False

    @property
    def cooldown_ms(self) -> float:
        return self._cooldown_ms

    @cooldown_ms.setter
    def cooldown_ms(self, value: float) -> None:
        self._cooldown_ms = float(value)
        self._clamp_cooldown()

    @abstractmethod
    def clone(self) -> Weapon:
        """A copy of this weapon with its own copy of the projectile prototype."""

    @abstractmethod
    def hud_image_path(self) -> str:
        """Image shown for the weapon in the HUD; empty when there is none."""

    def fire(self) -> bool:
        """Fire one projectile if the weapon is ready; True when it fired."""
        if not self._can_fire():
            return False
        self._last_fired = self._clock()
        projectile = self._create_projectile()
        projectile.initialize()

        owner_item = self.owner.graphics_item
        projectile_item = projectile._item()
        owner_center = Vec2(owner_item.width / 2, owner_item.height / 2)
        projectile_center = Vec2(projectile_item.width / 2, projectile_item.height / 2)
        delta = projectile_center - owner_center
        projectile.position.pos = projectile.position.pos - delta
        self.projectile_fired.emit(projectile)
        return True

    def update_weapon_cooldown(self, amount: float) -> None:
        self.cooldown_ms = self._cooldown_ms + amount

    def enable_sound(self) -> None:
        self.sound_enabled = True

    def disable_sound(self) -> None:
        self.sound_enabled = False

    def add_projectile_property(self, prop: ProjectileProperty) -> None:
        self._prototype().add_property(prop)

    def remove_projectile_property(self, prop: ProjectileProperty) -> None:
        self._prototype().remove_property(prop)

    def _copy_state_into(self, weapon: Weapon) -> Weapon:
        weapon.owner = self.owner
        weapon.energy_consumption = self.energy_consumption
        weapon.projectile_prototype = self._prototype().clone()
        weapon.sound_enabled = self.sound_enabled
        weapon.cooldown_ms = self._cooldown_ms
        return weapon

    def _prototype(self) -> Projectile:
        if self.projectile_prototype is None:
            raise RuntimeError("weapon has no projectile prototype")
        return self.projectile_prototype

    def _create_projectile(self) -> Projectile:
        projectile = self._prototype().clone()
        projectile.position = self.owner.position.copy()
        projectile.spawn_sound_info.enabled = self.sound_enabled
        return projectile

    def _can_fire(self) -> bool:
        if self.owner is None:
            raise RuntimeError("weapon has no owner")
        if self.owner.is_dead():
            return False
        if not self._first_shot:
            self._first_shot = True
            return True
        return self._clock() - self._last_fired >= self._cooldown_ms

    def _clamp_cooldown(self) -> None:
        if self._cooldown_ms < self.min_cooldown_ms:
            self._cooldown_ms = self.min_cooldown_ms


class PrimaryWeapon(Weapon):
    """A weapon fired continuously with the main trigger."""

    def clone(self) -> PrimaryWeapon:
        return self._copy_state_into(PrimaryWeapon(self._clock))

    def hud_image_path(self) -> str:
        return ""


class SecondaryWeapon(Weapon):
    """A special weapon whose HUD image comes from its projectile."""

    def clone(self) -> SecondaryWeapon:
        return self._copy_state_into(SecondaryWeapon(self._clock))

    def hud_image_path(self) -> str:
        return self._prototype().hud_pixmap_path


class WeaponBuilder:
    """Fluent builder that configures a weapon and hands out copies of it."""

    def __init__(self) -> None:
        self._weapon: Weapon | None = None

    def _require(self) -> Weapon:
        if self._weapon is None:
            raise BuilderError(
                "create_weapon must be called before setting any weapon properties."
            )
        return self._weapon

    def clone(self) -> WeaponBuilder:
        builder = WeaponBuilder()
        builder._weapon = self._require().clone()
        return builder

    def create_weapon(self, weapon_type: type[Weapon]) -> WeaponBuilder:
        self._weapon = weapon_type()
        return self

    def with_sound(self, sound_enabled: bool) -> WeaponBuilder:
        weapon = self._require()
        if sound_enabled:
            weapon.enable_sound()
        else:
            weapon.disable_sound()
        return self

    def with_weapon_cooldown_ms(self, cooldown_ms: float) -> WeaponBuilder:
        self._require().cooldown_ms = cooldown_ms
        return self

    def with_energy_consumption(self, energy_consumption: int) -> WeaponBuilder:
        if self._weapon is not None:
            self._weapon.energy_consumption = energy_consumption
        return self

    def with_projectile(self, projectile: Projectile) -> WeaponBuilder:
        self._require().projectile_prototype = projectile
        return self

    def build(self) -> Weapon:
        """A new copy of the configured weapon."""
        return self._require().clone()