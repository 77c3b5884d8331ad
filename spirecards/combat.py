"""Cards, characters and the rules that resolve damage, block and draws."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

HAND_SIZE = 5
MAX_ENERGY = 3


class CardType(Enum):
    """What a card does when it is played."""

    ATTACK = "Attack"
    BLOCK = "Block"
    DRAW = "Draw"


@dataclass(frozen=True)
class Card:
    """A playable card: its effect, the size of the effect and its energy cost."""

    type: CardType
    amount: int
    cost: int

    def play(self, player: "Player", enemy: "Enemy") -> None:
        """Apply this card's effect to the player or the enemy."""
        if self.type is CardType.ATTACK:
            enemy.apply_damage(self.amount)
        elif self.type is CardType.BLOCK:
            player.gain_block(self.amount)
        elif self.type is CardType.DRAW:
            for _ in range(self.amount):
                player.draw_card()


class Character:
    """Anything with a name and hit points."""

    def __init__(self, name: str = "Character", hp: int = 100) -> None:
        self.name = name
        self.hp = hp
        self.max_hp = hp

    def apply_damage(self, amount: int) -> None:
        """Lose hit points; at zero or below the character dies."""
        self.hp -= amount
        if self.hp <= 0:
            self.hp = 0
            self.die()

    def heal(self, amount: int) -> None:
        """Regain hit points, never above the maximum."""
        self.hp = min(self.hp + amount, self.max_hp)

    def die(self) -> None:
        self.hp = 0

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, hp={self.hp}/{self.max_hp})"


class Enemy(Character):
    """An opponent that deals a fixed amount of damage each turn."""

    def __init__(self, name: str, hp: int, kind: str, attack: int) -> None:
        super().__init__(name, hp)
        self.kind = kind
        self.attack = attack

    def apply_damage(self, amount: int) -> None:
        self.hp -= amount
        if self.hp <= 0:
            self.hp = 0
            self.die()


class Player(Character):
    """The hero: holds a deck, a hand drawn from it, block and energy."""

    def __init__(
        self,
        name: str,
        hp: int,
        gold: int,
        deck: Iterable[Card],
        *,
        hand_size: int = HAND_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(name, hp)
        self.gold = gold
        self.block = 0
        self.energy = MAX_ENERGY
        self.deck: tuple[Card, ...] = tuple(deck)
        if not self.deck:
            raise ValueError("a player needs at least one card in the deck")
        self._rng = rng if rng is not None else random.Random()
        self.hand: list[Card] = [self._random_card() for _ in range(hand_size)]

    def _random_card(self) -> Card:
        return self._rng.choice(self.deck)

    def draw_card(self) -> None:
        """Replace the first card of the hand with a random card from the deck."""
        self.hand[0] = self._random_card()

    def shuffle_hand(self) -> None:
        """Replace every card of the hand with a random card from the deck."""
        self.hand = [self._random_card() for _ in self.hand]

    def gain_block(self, amount: int) -> None:
        self.block += amount

    def apply_damage(self, amount: int) -> None:
        """Damage goes through block first; only the rest reaches hit points."""
        if self.block < amount:
            self.hp -= amount - self.block
        self.block = max(self.block - amount, 0)


_STARTER_CARDS = (
    (CardType.ATTACK, 6, 1, 5),
    (CardType.ATTACK, 8, 2, 2),
    (CardType.ATTACK, 4, 1, 2),
    (CardType.ATTACK, 10, 3, 1),
    (CardType.ATTACK, 5, 1, 3),
    (CardType.ATTACK, 7, 1, 2),
    (CardType.BLOCK, 5, 1, 4),
    (CardType.BLOCK, 8, 2, 2),
    (CardType.BLOCK, 3, 1, 2),
    (CardType.BLOCK, 10, 3, 1),
    (CardType.BLOCK, 6, 1, 3),
    (CardType.DRAW, 1, 1, 1),
    (CardType.DRAW, 2, 2, 1),
    (CardType.DRAW, 3, 3, 1),
)


def starter_deck() -> list[Card]:
    """The thirty cards the hero starts the game with."""
    return [
        Card(card_type, amount, cost)
        for card_type, amount, cost, copies in _STARTER_CARDS
        for _ in range(copies)
    ]