"""Class catalog -- loads and serves the hero and enemy archetypes.

The catalog is a static table (``data/classes.json`` next to this module)
loaded once per process and never mutated afterwards.  Enemies are
partitioned into three rarity tiers; the further the hero is from home,
the heavier the rarer tiers weigh in :meth:`ClassCatalog.random_enemy`.
"""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from rpg_combat.sim.core.classes import CharacterClass, Rarity
from rpg_combat.sim.core.distance import Distance, DistanceKind
from rpg_combat.sim.core.errors import CatalogError
from rpg_combat.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

_DEFAULT_CLASSES_PATH = Path(__file__).resolve().parent / "data" / "classes.json"

# Per-tier weights for each distance band: (common, rare, legendary).
# Weak enemies never become unreachable; legendary ones never appear near home.
TIER_WEIGHTS: dict[DistanceKind, tuple[int, int, int]] = {
    DistanceKind.NEAR: (9, 2, 0),
    DistanceKind.MID: (7, 10, 1),
    DistanceKind.FAR: (1, 6, 3),
}


class _CatalogTable(BaseModel):
    """Raw shape of the classes JSON file."""

    hero: CharacterClass
    common: list[CharacterClass]
    rare: list[CharacterClass]
    legendary: list[CharacterClass]


class ClassCatalog:
    """Serves the immutable class table.

    Usage::

        catalog = ClassCatalog.load()
        hero = catalog.hero
        rat = catalog.get("rat")
        enemy = catalog.random_enemy(Distance.far(20), GameRNG(7))
    """

    def __init__(
        self,
        hero: CharacterClass,
        common: list[CharacterClass],
        rare: list[CharacterClass],
        legendary: list[CharacterClass],
    ) -> None:
        self.hero = hero
        self.common = tuple(common)
        self.rare = tuple(rare)
        self.legendary = tuple(legendary)

        self._tiers: dict[str, Rarity] = {}
        self._classes: dict[str, CharacterClass] = {hero.name: hero}
        for rarity, tier in (
            (Rarity.COMMON, self.common),
            (Rarity.RARE, self.rare),
            (Rarity.LEGENDARY, self.legendary),
        ):
            for cls in tier:
                self._tiers[cls.name] = rarity
                self._classes[cls.name] = cls
        self._validate()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path | None = None) -> ClassCatalog:
        """Load the catalog from a JSON file.

        Parameters
        ----------
        path:
            Path to the JSON file.  Defaults to ``data/classes.json``
            shipped with this package.
        """
        if path is None:
            path = _DEFAULT_CLASSES_PATH
        path = Path(path)

        with open(path, encoding="utf-8") as f:
            raw: dict[str, Any] = json.load(f)

        table = _CatalogTable.model_validate(raw)
        catalog = cls(table.hero, table.common, table.rare, table.legendary)
        logger.debug("Loaded %r from %s", catalog, path)
        return catalog

    def _validate(self) -> None:
        """Enforce the catalog invariants; raise :class:`CatalogError`."""
        names = [self.hero.name] + [c.name for c in self.enemies()]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise CatalogError(f"Duplicate class names: {duplicates}")

        for rarity, tier in self.tiers().items():
            if not tier:
                raise CatalogError(f"Tier {rarity.value!r} is empty")

        # No enemy stat may grow faster per level than the hero's.
        for enemy in self.enemies():
            for attr in ("hp", "strength", "speed"):
                enemy_rate = getattr(enemy, attr).increase
                hero_rate = getattr(self.hero, attr).increase
                if enemy_rate > hero_rate:
                    raise CatalogError(
                        f"{enemy.name}.{attr} grows by {enemy_rate} per level, "
                        f"faster than the hero's {hero_rate}"
                    )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, name: str) -> CharacterClass:
        """Return the class called *name*.

        Raises
        ------
        KeyError
            If no such class exists.
        """
        try:
            return self._classes[name]
        except KeyError:
            raise KeyError(f"Unknown class: {name!r}") from None

    def tier_of(self, name: str) -> Rarity:
        """Return the rarity tier of enemy *name* (``KeyError`` for the hero)."""
        try:
            return self._tiers[name]
        except KeyError:
            raise KeyError(f"{name!r} is not an enemy class") from None

    def tiers(self) -> dict[Rarity, tuple[CharacterClass, ...]]:
        return {
            Rarity.COMMON: self.common,
            Rarity.RARE: self.rare,
            Rarity.LEGENDARY: self.legendary,
        }

    def enemies(self) -> list[CharacterClass]:
        """Every enemy class, common tier first."""
        return [*self.common, *self.rare, *self.legendary]

    # ------------------------------------------------------------------
    # Weighted enemy selection
    # ------------------------------------------------------------------

    def candidates(self, distance: Distance) -> list[tuple[CharacterClass, int]]:
        """Flatten the tiers into ``(class, weight)`` pairs for *distance*.

        Every class in a tier gets that tier's weight; only the distance
        kind matters, not its step count.
        """
        w_common, w_rare, w_legendary = TIER_WEIGHTS[distance.kind]
        return (
            [(c, w_common) for c in self.common]
            + [(c, w_rare) for c in self.rare]
            + [(c, w_legendary) for c in self.legendary]
        )

    def random_enemy(self, distance: Distance, rng: GameRNG) -> CharacterClass:
        """Draw one enemy class, weighted by tier for *distance*.

        Raises
        ------
        CatalogError
            If the candidate pool is empty or carries no positive weight.
            The shipped catalog never triggers this.
        """
        pool = self.candidates(distance)
        try:
            return rng.weighted_choice(
                [c for c, _ in pool], [w for _, w in pool],
            )
        except ValueError as exc:
            raise CatalogError(
                f"No enemy can be drawn at {distance.kind.value} distance: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"ClassCatalog(common={len(self.common)}, "
            f"rare={len(self.rare)}, "
            f"legendary={len(self.legendary)})"
        )


@functools.lru_cache(maxsize=1)
def default_catalog() -> ClassCatalog:
    """The shipped catalog, loaded on first use and shared afterwards."""
    return ClassCatalog.load()
