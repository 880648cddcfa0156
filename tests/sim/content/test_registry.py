"""Tests for ClassCatalog -- loading, invariants, weighted enemy draws."""

from __future__ import annotations

import json

import pytest

from rpg_combat.sim.content import registry
from rpg_combat.sim.content.registry import ClassCatalog, default_catalog
from rpg_combat.sim.core.classes import CharacterClass, Rarity, StatusEffectKind
from rpg_combat.sim.core.distance import Distance, DistanceKind
from rpg_combat.sim.core.errors import CatalogError
from rpg_combat.sim.core.rng import GameRNG
from rpg_combat.sim.core.stats import Stat


def _cls(name: str, hp_inc: int = 3) -> CharacterClass:
    return CharacterClass(
        name=name,
        hp=Stat.of(10, hp_inc),
        strength=Stat.of(5, 2),
        speed=Stat.of(5, 2),
    )


def _tier_shares(catalog: ClassCatalog, distance: Distance, n: int, seed: int) -> dict[Rarity, float]:
    rng = GameRNG(seed)
    counts = {rarity: 0 for rarity in Rarity}
    for _ in range(n):
        counts[catalog.tier_of(catalog.random_enemy(distance, rng).name)] += 1
    return {rarity: count / n for rarity, count in counts.items()}


# ---------------------------------------------------------------------------
# Shipped table
# ---------------------------------------------------------------------------

class TestShippedCatalog:
    def test_tier_sizes(self, catalog):
        assert len(catalog.common) == 5
        assert len(catalog.rare) == 7
        assert len(catalog.legendary) == 5

    def test_known_stats(self, catalog):
        spider = catalog.get("spider")
        assert spider.hp == Stat.of(10, 3)
        assert spider.inflicts.kind == StatusEffectKind.POISONED
        assert spider.inflicts.magnitude == 20
        assert catalog.get("golem").speed == Stat.of(2, 1)
        assert catalog.get("wolf").inflicts is None

    def test_hero_not_an_enemy(self, catalog):
        assert "hero" not in {c.name for c in catalog.enemies()}
        with pytest.raises(KeyError):
            catalog.tier_of("hero")

    def test_unknown_class(self, catalog):
        with pytest.raises(KeyError):
            catalog.get("unicorn")

    def test_tier_of(self, catalog):
        assert catalog.tier_of("rat") == Rarity.COMMON
        assert catalog.tier_of("dragon") == Rarity.RARE
        assert catalog.tier_of("phoenix") == Rarity.LEGENDARY

    def test_default_catalog_is_cached(self):
        assert default_catalog() is default_catalog()


# ---------------------------------------------------------------------------
# Load-time invariants
# ---------------------------------------------------------------------------

class TestValidation:
    def test_duplicate_names(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            ClassCatalog(_cls("hero", 7), [_cls("rat")], [_cls("rat")], [_cls("orc")])

    def test_empty_tier(self):
        with pytest.raises(CatalogError, match="empty"):
            ClassCatalog(_cls("hero", 7), [_cls("rat")], [], [_cls("orc")])

    def test_enemy_outgrowing_hero(self):
        with pytest.raises(CatalogError, match="faster than the hero"):
            ClassCatalog(_cls("hero", 3), [_cls("rat", 4)], [_cls("orc")], [_cls("imp")])

    def test_load_from_file(self, tmp_path):
        def dump(c: CharacterClass) -> dict:
            return c.model_dump(mode="json")

        path = tmp_path / "classes.json"
        path.write_text(json.dumps({
            "hero": dump(_cls("hero", 7)),
            "common": [dump(_cls("rat"))],
            "rare": [dump(_cls("orc"))],
            "legendary": [dump(_cls("imp"))],
        }))

        catalog = ClassCatalog.load(path)
        assert [c.name for c in catalog.enemies()] == ["rat", "orc", "imp"]


# ---------------------------------------------------------------------------
# Weighted selection
# ---------------------------------------------------------------------------

class TestRandomEnemy:
    def test_candidate_weights(self, catalog):
        weights = {c.name: w for c, w in catalog.candidates(Distance.mid(10))}
        assert weights["rat"] == 7
        assert weights["orc"] == 10
        assert weights["phoenix"] == 1

    def test_steps_do_not_change_weights(self, catalog):
        assert catalog.candidates(Distance.far(16)) == catalog.candidates(Distance.far(90))

    def test_near_never_legendary(self, catalog):
        shares = _tier_shares(catalog, Distance.near(3), n=3000, seed=1)
        assert shares[Rarity.LEGENDARY] == 0.0

    def test_mid_tier_shares(self, catalog):
        # common 5*7=35, rare 7*10=70, legendary 5*1=5 out of 110
        shares = _tier_shares(catalog, Distance.mid(10), n=10_000, seed=2)
        assert shares[Rarity.COMMON] == pytest.approx(35 / 110, abs=0.03)
        assert shares[Rarity.RARE] == pytest.approx(70 / 110, abs=0.03)
        assert shares[Rarity.LEGENDARY] == pytest.approx(5 / 110, abs=0.02)

    def test_far_tier_shares(self, catalog):
        # common 5*1=5, rare 7*6=42, legendary 5*3=15 out of 62
        shares = _tier_shares(catalog, Distance.far(20), n=10_000, seed=3)
        assert shares[Rarity.COMMON] == pytest.approx(5 / 62, abs=0.02)
        assert shares[Rarity.LEGENDARY] == pytest.approx(15 / 62, abs=0.03)

    def test_same_seed_same_enemy(self, catalog):
        a = catalog.random_enemy(Distance.far(), GameRNG(9))
        b = catalog.random_enemy(Distance.far(), GameRNG(9))
        assert a == b

    def test_no_positive_weight_is_catalog_error(self, catalog, monkeypatch):
        monkeypatch.setitem(registry.TIER_WEIGHTS, DistanceKind.NEAR, (0, 0, 0))
        with pytest.raises(CatalogError):
            catalog.random_enemy(Distance.near(2), GameRNG(0))
