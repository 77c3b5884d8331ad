"""Turn handling for one fight between the player and an enemy."""

from __future__ import annotations

from enum import Enum

from .combat import MAX_ENERGY, Card, Enemy, Player


class Screen(Enum):
    """Which screen the game shows."""

    GAME_OVER = -1
    START = 0
    BATTLE = 1
    VICTORY = 2


class IllegalPlay(Exception):
    """Raised when an action is not allowed in the current state of the battle."""


class Battle:
    """A fight: the player plays cards, ends the turn, then the enemy strikes."""

    def __init__(self, player: Player, enemy: Enemy, *, max_energy: int = MAX_ENERGY) -> None:
        self.player = player
        self.enemy = enemy
        self.max_energy = max_energy
        self.player_turn = True
        self.played: set[int] = set()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.player.hand):
            raise IndexError(f"no card in hand slot {index}")

    def can_play(self, index: int) -> bool:
        """Whether the card in the given hand slot may be played now."""
        self._check_index(index)
        return (
            self.player_turn
            and index not in self.played
            and self.player.hand[index].cost <= self.player.energy
        )

    def play_card(self, index: int) -> Card:
        """Play the card in the given slot, pay its cost, and return it."""
        if not self.can_play(index):
            raise IllegalPlay(f"the card in slot {index} cannot be played now")
        card = self.player.hand[index]
        card.play(self.player, self.enemy)
        self.player.energy -= card.cost
        self.played.add(index)
        return card

    def end_turn(self) -> None:
        """Hand the turn to the enemy and refill the player's energy."""
        if not self.player_turn:
            raise IllegalPlay("it is not the player's turn")
        self.player_turn = False
        self.player.energy = self.max_energy

    def enemy_turn(self) -> None:
        """The enemy attacks, then the player gets a fresh hand and turn."""
        if self.player_turn:
            raise IllegalPlay("it is the player's turn")
        self.player.apply_damage(self.enemy.attack)
        self.player_turn = True
        self.played.clear()
        self.player.shuffle_hand()

    def outcome(self) -> Screen:
        """The screen the game should move to after the current state."""
        if self.player.hp <= 0:
            return Screen.GAME_OVER
        if self.enemy.hp <= 0:
            return Screen.VICTORY
        return Screen.BATTLE