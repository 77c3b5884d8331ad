# spirecards

A small turn-based card battle game. You play the Ironclad (100 HP), holding a
hand of five cards drawn at random from a thirty-card deck, and fight a Slaver
(40 HP, hits for 10) until one of you falls.

## Installing

```
pip install .
```

## Playing

```
spirecards
```

A 1280×720 window opens at the start screen. Click **START** to enter the
fight. Close the window or press Escape to quit.

Options:

- `--assets DIR` — directory the images are read from (default: `assets`,
  relative to the current directory). The game looks there for
  `mainbackground.png`, `enemy_level.png`, `ironclad.png` and `slaver.png`.
  Images are not shipped with the package; any that are missing are simply not
  drawn, and the game still plays.
- `--seed N` — seed the random card draws, so a game can be replayed.

### Rules

You start each turn with 3 energy. Click a card in your hand to play it if you
can pay its cost; each hand slot can be played once per turn:

- **Attack** deals its amount in damage to the enemy.
- **Block** adds its amount to your block.
- **Draw** replaces the first card in your hand with a random card from the
  deck, once for each point of its amount.

Click **End Turn** when you are done. Your energy is refilled to 3, the enemy
strikes at once — the hit is taken out of your block first and only the rest
reaches your HP — and you are dealt a fresh hand of five.

Bring the enemy's HP to zero and the "ENEMY KILLED!" screen is shown; if your
HP reaches zero the "GAME OVER" screen is shown.

## Using the game logic

The rules work without a window:

```python
from spirecards.combat import Enemy, Player, starter_deck
from spirecards.battle import Battle

player = Player("Ironclad", 100, 10, starter_deck())
enemy = Enemy("Slaver", 40, "Basic", 10)
battle = Battle(player, enemy)

if battle.can_play(0):
    battle.play_card(0)
battle.end_turn()
battle.enemy_turn()
print(battle.outcome())
```

- `spirecards.combat` — `CardType`, `Card`, `Character`, `Enemy`, `Player`
  and `starter_deck()`. `Player` takes an optional `rng` (a `random.Random`)
  and `hand_size`.
- `spirecards.battle` — `Battle` (`can_play`, `play_card`, `end_turn`,
  `enemy_turn`, `outcome`), the `Screen` enum, and `IllegalPlay`, raised when
  a card cannot be played or a turn is ended out of order. A hand slot outside
  the hand raises `IndexError`.
- `spirecards.app` — the pygame front end: `GameApp` (`handle_click`, `draw`,
  `run`), `card_rects()` and `main()`.

## What it does not do

There is a single fight against a single enemy; after victory or defeat the
game stays on that screen until the window is closed. There are no further
levels, no map, no shop, no items, potions or relics, and the player's gold
is not used. Nothing is saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```