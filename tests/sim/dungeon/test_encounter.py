"""Tests for EncounterManager -- spawning, settling battles, resting."""

import pytest

from rpg_combat.sim.core.classes import StatusEffectKind
from rpg_combat.sim.core.distance import Distance
from rpg_combat.sim.core.entities import Character
from rpg_combat.sim.core.errors import CharacterDied
from rpg_combat.sim.core.events import BattleLost, BattleWon, Bribe, Heal
from rpg_combat.sim.core.game_state import GameState
from rpg_combat.sim.dungeon.encounter import EncounterManager


def _game(hero_class, steps: int = 0, gold: int = 0, level: int = 1) -> GameState:
    return GameState(
        player=Character.hero(hero_class, level=level),
        gold=gold,
        steps_from_home=steps,
    )


class TestSpawn:
    def test_level_follows_distance(self, catalog, hero_class, make_dice):
        rat = catalog.get("rat")
        manager = EncounterManager(catalog, make_dice(enemy=rat))

        enemy = manager.spawn_enemy(_game(hero_class, steps=3))

        assert enemy.name == "rat"
        assert enemy.level == 2
        assert enemy.current_hp == enemy.max_hp == 16
        assert not enemy.is_player

    def test_level_follows_hero_level(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice())
        enemy = manager.spawn_enemy(_game(hero_class, steps=20, level=4))
        assert enemy.level == 4 // 2 + 20 - 1

    def test_distance_override(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice())
        enemy = manager.spawn_enemy(_game(hero_class, steps=0), Distance.far(30))
        assert enemy.level == 29

    def test_level_never_below_one(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice(level_offset=-5))
        assert manager.spawn_enemy(_game(hero_class, steps=1)).level == 1

    def test_no_spawn_at_home(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice(spawn=True))
        assert manager.maybe_spawn_enemy(_game(hero_class, steps=0)) is None

    def test_spawn_roll_failed(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice(spawn=False))
        assert manager.maybe_spawn_enemy(_game(hero_class, steps=5)) is None

    def test_spawn_roll_succeeded(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice(spawn=True))
        enemy = manager.maybe_spawn_enemy(_game(hero_class, steps=5))
        assert enemy is not None
        assert catalog.tier_of(enemy.name) is not None


class TestBattle:
    def test_rat_end_to_end(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=1)
        assert game.player.max_hp == 30
        rat = Character.new(catalog.get("rat"), level=0)
        manager = EncounterManager(catalog, make_dice())

        events = manager.battle(game, rat)

        won = [e for e in events if isinstance(e, BattleWon)]
        assert won == [BattleWon(xp=5, levels_up=0, gold=0)]
        assert game.player.xp < game.player.xp_for_next

    def test_victory_pays_out(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=2)
        rat = Character.new(catalog.get("rat"), level=1)
        manager = EncounterManager(catalog, make_dice())

        events = manager.battle(game, rat)

        assert events[-1] == BattleWon(xp=13, levels_up=0, gold=50)
        assert game.gold == 50
        assert game.player.xp == 13
        assert game.player.current_hp == 23

    def test_bribe_deducts_gold(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=2, gold=120)
        rat = Character.new(catalog.get("rat"), level=1)
        manager = EncounterManager(catalog, make_dice(bribes=True))

        events = manager.battle(game, rat, bribe=True)

        assert events[-1] == Bribe(cost=50)
        assert game.gold == 70
        assert game.player.xp == 0

    def test_flee_changes_nothing(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=2, gold=10)
        orc = Character.new(catalog.get("orc"), level=5)
        manager = EncounterManager(catalog, make_dice(flee=True))

        manager.battle(game, orc, run=True)

        assert game.gold == 10
        assert game.player.current_hp == game.player.max_hp

    def test_death_raises_with_events(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=20)
        phoenix = Character.new(catalog.get("phoenix"), level=10)
        manager = EncounterManager(catalog, make_dice())

        with pytest.raises(CharacterDied) as excinfo:
            manager.battle(game, phoenix)

        assert excinfo.value.player is game.player
        assert excinfo.value.events[-1] == BattleLost()
        assert game.player.is_dead

    def test_settle_appends_reward(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=2)
        rat = Character.new(catalog.get("rat"), level=1)
        manager = EncounterManager(catalog, make_dice())
        result = manager.resolver.resolve(game.player, rat)

        events = manager.settle(game, rat, result)

        assert events[:len(result.events)] == result.events
        assert events[len(result.events):] == [BattleWon(xp=13, levels_up=0, gold=50)]
        assert game.gold == 50

    def test_settle_loss_does_not_raise(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=20, gold=30)
        phoenix = Character.new(catalog.get("phoenix"), level=10)
        manager = EncounterManager(catalog, make_dice())
        result = manager.resolver.resolve(game.player, phoenix)

        events = manager.settle(game, phoenix, result)

        assert events[-1] == BattleLost()
        assert game.gold == 30

    def test_reset_after_death(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=20, gold=300)
        phoenix = Character.new(catalog.get("phoenix"), level=10)
        manager = EncounterManager(catalog, make_dice())

        with pytest.raises(CharacterDied):
            manager.battle(game, phoenix)
        game.reset(catalog)

        assert game.gold == 0
        assert game.is_home
        assert not game.player.is_dead


class TestRest:
    def test_heals_at_home(self, catalog, hero_class, make_dice):
        game = _game(hero_class)
        game.player.take_damage(12)
        manager = EncounterManager(catalog, make_dice())

        assert manager.rest(game) == [Heal(item=None, recovered=12, healed=False)]
        assert game.player.current_hp == game.player.max_hp

    def test_cures_status(self, catalog, hero_class, make_dice):
        game = _game(hero_class)
        game.player.status_effect = StatusEffectKind.BURNING
        game.player.status_damage = 2
        manager = EncounterManager(catalog, make_dice())

        assert manager.rest(game) == [Heal(item=None, recovered=0, healed=True)]
        assert game.player.status_effect is None

    def test_nothing_to_heal(self, catalog, hero_class, make_dice):
        manager = EncounterManager(catalog, make_dice())
        assert manager.rest(_game(hero_class)) == []

    def test_not_at_home(self, catalog, hero_class, make_dice):
        game = _game(hero_class, steps=3)
        game.player.take_damage(12)
        manager = EncounterManager(catalog, make_dice())

        assert manager.rest(game) == []
        assert game.player.current_hp == game.player.max_hp - 12
