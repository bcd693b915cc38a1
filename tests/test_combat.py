"""Tests for :mod:`mysticquest.game.combat`.

Console output is captured in memory and player input is scripted.
"""
from pathlib import Path
import io
import sys

from rich.console import Console

sys.path.append(str(Path(__file__).resolve().parents[1]))

from mysticquest.game import CombatLoop, CombatOutcome, SaveManager
from mysticquest.models import Config, Player, Enemy
from mysticquest.ui import Panels


def make_loop(tmp_path, actions):
    config = Config(save_file=str(tmp_path / "game_state.txt"))
    console = Console(file=io.StringIO(), width=200)
    inputs = iter(actions)
    loop = CombatLoop(config, SaveManager(config.save_file), console, Panels(config), lambda prompt: next(inputs))
    return loop, console


def test_one_exchange_is_deterministic(tmp_path):
    loop, _ = make_loop(tmp_path, [])
    player, enemy = Player("Hero"), Enemy()
    messages = loop.resolve_attack(player, enemy)
    assert messages == ["Hero attacks the enemy!", "Goblin attacks the player!"]
    assert (enemy.health, player.health) == (30, 85)


def test_no_retaliation_once_enemy_falls(tmp_path):
    loop, _ = make_loop(tmp_path, [])
    player, enemy = Player("Hero"), Enemy(health=10)
    assert loop.resolve_attack(player, enemy) == ["Hero attacks the enemy!"]
    assert (enemy.health, player.health) == (0, 100)


def test_defeat_checked_before_victory(tmp_path):
    loop, _ = make_loop(tmp_path, [])
    assert loop.check_outcome(Player("Hero", health=0), Enemy(health=0)) is CombatOutcome.DEFEAT
    assert loop.check_outcome(Player("Hero"), Enemy(health=0)) is CombatOutcome.VICTORY
    assert loop.check_outcome(Player("Hero"), Enemy()) is CombatOutcome.ONGOING


def test_three_attacks_win(tmp_path):
    loop, console = make_loop(tmp_path, ["1", "1", "1"])
    player = Player("Hero")
    assert loop.run(player) is CombatOutcome.VICTORY
    assert player.health == 70
    output = console.file.getvalue()
    assert "You defeated the enemy! Victory!" in output
    assert output.count("Goblin attacks the player!") == 2


def test_defeat_when_player_falls(tmp_path):
    loop, console = make_loop(tmp_path, ["1"])
    player = Player("Hero", health=10)
    assert loop.run(player) is CombatOutcome.DEFEAT
    assert player.health == 0
    assert "You have been defeated. Game over." in console.file.getvalue()


def test_save_and_exit_has_no_outcome_message(tmp_path):
    loop, console = make_loop(tmp_path, ["1", "3"])
    assert loop.run(Player("Hero")) is CombatOutcome.SAVED
    output = console.file.getvalue()
    assert "Game state saved successfully." in output
    assert "Victory" not in output
    assert "defeated" not in output
    assert (tmp_path / "game_state.txt").read_text() == "Hero\n85\n"


def test_failed_save_still_exits(tmp_path):
    loop, console = make_loop(tmp_path, ["3"])
    loop.save_manager = SaveManager(str(tmp_path))
    assert loop.run(Player("Hero")) is CombatOutcome.SAVED
    assert "Error saving game: Failed to open file for saving." in console.file.getvalue()


def test_treasure_and_invalid_input_do_not_cost_a_turn(tmp_path):
    loop, console = make_loop(tmp_path, ["2", "9", "run", "2", "3"])
    player = Player("Hero")
    assert loop.run(player) is CombatOutcome.SAVED
    assert player.treasures_collected == 2
    assert player.health == 100
    assert console.file.getvalue().count("Invalid action. Try again.") == 2
    output = console.file.getvalue()
    assert output.count("Enemy: Goblin, Health: 50") == 5
    assert "Enemy: Goblin, Health: 30" not in output
    assert "Goblin attacks the player!" not in output


def test_end_panel_colour_follows_outcome():
    panels = Panels(Config())
    assert panels.render_end_panel("VICTORY", "won", won=True).border_style == "green"
    assert panels.render_end_panel("GAME OVER", "lost").border_style == "red"
    assert panels.render_enemy_panel("ENEMY", "Enemy: Goblin, Health: 50").subtitle == "Goblin"
