import random

import pygame
import pytest

from spirecards.app import (
    BLACK,
    BROWN,
    DARKGRAY,
    END_TURN_BUTTON,
    START_BUTTON,
    WINDOW_SIZE,
    GameApp,
    card_rects,
    main,
)
from spirecards.battle import Screen
from spirecards.combat import Card, CardType, Enemy, Player


def make_app(tmp_path, card=None, player_hp=100, enemy_hp=40, attack=10):
    card = card or Card(CardType.ATTACK, 6, 1)
    player = Player("Ironclad", player_hp, 10, [card], rng=random.Random(0))
    enemy = Enemy("Slaver", enemy_hp, "Basic", attack)
    return GameApp(player, enemy, assets_dir=tmp_path)


def battle_app(tmp_path, **kwargs):
    app = make_app(tmp_path, **kwargs)
    app.handle_click(START_BUTTON.center)
    return app


def test_card_rects_are_five_disjoint_slots():
    rects = card_rects()
    assert len(rects) == 5
    assert all(r.size == (160, 140) for r in rects)
    for left, right in zip(rects, rects[1:]):
        assert left.right < right.left
        assert left.y == right.y


def test_start_button_opens_battle(tmp_path):
    app = make_app(tmp_path)
    assert app.screen is Screen.START
    assert app.handle_click(START_BUTTON.center) is Screen.BATTLE


def test_click_outside_start_button_stays(tmp_path):
    app = make_app(tmp_path)
    assert app.handle_click((5, 5)) is Screen.START


def test_playing_a_card_hits_enemy_and_spends_energy(tmp_path):
    app = battle_app(tmp_path)
    card = app.player.hand[0]
    energy = app.player.energy
    app.handle_click(card_rects()[0].center)
    assert app.enemy.hp == app.enemy.max_hp - card.amount
    assert app.player.energy == energy - card.cost


def test_card_cannot_be_played_twice_in_a_turn(tmp_path):
    app = battle_app(tmp_path)
    slot = card_rects()[1].center
    app.handle_click(slot)
    hp_after_first = app.enemy.hp
    app.handle_click(slot)
    assert app.enemy.hp == hp_after_first


def test_card_too_expensive_is_ignored(tmp_path):
    app = battle_app(tmp_path, card=Card(CardType.ATTACK, 10, 3))
    app.handle_click(card_rects()[0].center)
    app.handle_click(card_rects()[1].center)
    assert app.player.energy == 0
    assert app.enemy.hp == app.enemy.max_hp - 10


def test_end_turn_lets_enemy_strike_and_restores_energy(tmp_path):
    app = battle_app(tmp_path)
    app.handle_click(card_rects()[0].center)
    screen = app.handle_click(END_TURN_BUTTON.center)
    assert screen is Screen.BATTLE
    assert app.player.hp == app.player.max_hp - app.enemy.attack
    assert app.player.energy == app.battle.max_energy
    assert app.battle.player_turn
    assert app.battle.played == set()


def test_block_absorbs_enemy_attack(tmp_path):
    app = battle_app(tmp_path, card=Card(CardType.BLOCK, 5, 1), attack=10)
    app.handle_click(card_rects()[0].center)
    app.handle_click(card_rects()[1].center)
    app.handle_click(END_TURN_BUTTON.center)
    assert app.player.hp == app.player.max_hp
    assert app.player.block == 0


def test_killing_enemy_shows_victory(tmp_path):
    app = battle_app(tmp_path, enemy_hp=5)
    assert app.handle_click(card_rects()[0].center) is Screen.VICTORY
    assert app.enemy.hp == 0


def test_player_death_shows_game_over(tmp_path):
    app = battle_app(tmp_path, player_hp=5)
    assert app.handle_click(END_TURN_BUTTON.center) is Screen.GAME_OVER


def test_draw_start_screen(tmp_path):
    app = make_app(tmp_path)
    surface = pygame.Surface(WINDOW_SIZE)
    app.draw(surface)
    assert surface.get_at((START_BUTTON.x + 2, START_BUTTON.y + 2))[:3] == BLACK


def test_draw_battle_screen(tmp_path):
    app = battle_app(tmp_path)
    surface = pygame.Surface(WINDOW_SIZE)
    app.draw(surface)
    first = card_rects()[0]
    assert surface.get_at((first.x + 2, first.bottom - 2))[:3] == BROWN
    assert surface.get_at((END_TURN_BUTTON.x + 2, END_TURN_BUTTON.y + 2))[:3] == DARKGRAY


def test_draw_game_over_is_black(tmp_path):
    app = battle_app(tmp_path, player_hp=5)
    app.handle_click(END_TURN_BUTTON.center)
    surface = pygame.Surface(WINDOW_SIZE)
    surface.fill((200, 10, 10))
    app.draw(surface)
    assert surface.get_at((5, 5))[:3] == BLACK


def test_background_image_is_used(tmp_path):
    color = (12, 34, 56)
    image = pygame.Surface(WINDOW_SIZE)
    image.fill(color)
    pygame.image.save(image, str(tmp_path / "mainbackground.png"))
    app = make_app(tmp_path)
    surface = pygame.Surface(WINDOW_SIZE)
    app.draw(surface)
    assert surface.get_at((5, 5))[:3] == color


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0