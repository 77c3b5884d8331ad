"""The game window: start screen, battle screen, victory and game-over screens."""

from __future__ import annotations

import argparse
import os
import random
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .battle import Battle, Screen  # noqa: E402
from .combat import Enemy, Player, starter_deck  # noqa: E402

WINDOW_SIZE = (1280, 720)
TITLE = "SLAY THE SPIRE"
FPS = 60

WHITE = (255, 255, 255)
RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)
BROWN = (127, 106, 79)
DARKGRAY = (80, 80, 80)

START_BUTTON = pygame.Rect(540, 335, 200, 50)
START_BUTTON_FRAME = pygame.Rect(545, 340, 190, 40)
END_TURN_BUTTON = pygame.Rect(300, 600, 150, 50)

_CARD_LEFTS = (167.8, 364.2, 560.2, 756.2, 952.2)
_CARD_TOP = 146.4
_CARD_SIZE = (160, 140)

_BACKGROUND = "mainbackground.png"
_BATTLE_BACKGROUND = "enemy_level.png"
_PLAYER_SPRITE = "ironclad.png"
_ENEMY_SPRITE = "slaver.png"


def card_rects() -> list[pygame.Rect]:
    """The clickable areas of the five hand slots, left to right."""
    width, height = _CARD_SIZE
    return [
        pygame.Rect(round(left), round(_CARD_TOP), width, height)
        for left in _CARD_LEFTS
    ]


class GameApp:
    """Holds the game state and turns clicks into moves and state into pictures."""

    def __init__(
        self,
        player: Optional[Player] = None,
        enemy: Optional[Enemy] = None,
        *,
        assets_dir: "str | os.PathLike[str]" = "assets",
        rng: Optional[random.Random] = None,
    ) -> None:
        if player is None:
            player = Player("Ironclad", 100, 10, starter_deck(), rng=rng)
        if enemy is None:
            enemy = Enemy("Slaver", 40, "Basic", 10)
        self.player = player
        self.enemy = enemy
        self.battle = Battle(player, enemy)
        self.screen = Screen.START
        self.assets_dir = Path(assets_dir)
        self._images: dict[str, Optional[pygame.Surface]] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def _advance(self) -> None:
        if not self.battle.player_turn:
            self.battle.enemy_turn()
        self.screen = self.battle.outcome()

    def handle_click(self, pos: tuple[int, int]) -> Screen:
        """React to a left click at the given window position; return the new screen."""
        if self.player.hp <= 0:
            self.screen = Screen.GAME_OVER
        if self.screen is Screen.START:
            if START_BUTTON.collidepoint(pos):
                self.screen = Screen.BATTLE
        elif self.screen is Screen.BATTLE:
            if self.battle.player_turn:
                if END_TURN_BUTTON.collidepoint(pos):
                    self.battle.end_turn()
                else:
                    for index, rect in enumerate(card_rects()):
                        if (
                            index < len(self.player.hand)
                            and rect.collidepoint(pos)
                            and self.battle.can_play(index)
                        ):
                            self.battle.play_card(index)
                            break
            self._advance()
        return self.screen

    def _image(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self.assets_dir / name))
            except (FileNotFoundError, pygame.error):
                self._images[name] = None
        return self._images[name]

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(
        self,
        surface: pygame.Surface,
        text: str,
        pos: tuple[float, float],
        size: int,
        color: tuple[int, int, int] = WHITE,
    ) -> None:
        surface.blit(self._font(size).render(text, True, color), (round(pos[0]), round(pos[1])))

    def _blit(self, surface: pygame.Surface, name: str, pos: tuple[int, int]) -> None:
        image = self._image(name)
        if image is not None:
            surface.blit(image, pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current screen onto the surface."""
        if self.screen is Screen.START:
            self._draw_start(surface)
        elif self.screen is Screen.BATTLE:
            self._draw_battle(surface)
        elif self.screen is Screen.VICTORY:
            self._blit(surface, _BACKGROUND, (0, 0))
            self._text(surface, "ENEMY KILLED!", (250, 270), 100)
        else:
            surface.fill(BLACK)
            self._text(surface, "GAME OVER", (320, 270), 100)

    def _draw_start(self, surface: pygame.Surface) -> None:
        surface.fill(RAYWHITE)
        self._blit(surface, _BACKGROUND, (0, 0))
        pygame.draw.rect(surface, BLACK, START_BUTTON)
        pygame.draw.rect(surface, WHITE, START_BUTTON_FRAME, width=1)
        self._text(surface, "START", (START_BUTTON.x + 60, START_BUTTON.y + 15), 20)
        self._text(surface, TITLE, (335, 100), 70)

    def _draw_battle(self, surface: pygame.Surface) -> None:
        player, enemy = self.player, self.enemy
        surface.fill(RAYWHITE)
        self._blit(surface, _BATTLE_BACKGROUND, (0, 0))
        self._blit(surface, _PLAYER_SPRITE, (0, 280))
        self._blit(surface, _ENEMY_SPRITE, (1090, 270))

        self._text(surface, player.name, (70, 660), 30)
        self._text(surface, enemy.name, (1145, 560), 30)
        self._text(surface, f"HP:{player.hp}", (40, 250), 30)
        self._text(surface, f"HP:{enemy.hp}", (1145, 240), 30)
        self._text(surface, f"Energies: {player.energy}", (100, 40), 20)
        self._text(surface, f"Block: {player.block}", (210, 350), 20)
        self._text(surface, "LEVEL: ENEMY", (524.2, 40), 30)

        for rect, left, card in zip(card_rects(), _CARD_LEFTS, player.hand):
            pygame.draw.rect(surface, BROWN, rect)
            self._text(surface, card.type.value, (left + 10, 153.1), 20)
            self._text(surface, "Amount = ", (left + 10, 203.1), 20)
            self._text(surface, str(card.amount), (left + 110, 203.1), 20)
            self._text(surface, "Cost = ", (left + 12, 243.1), 20)
            self._text(surface, str(card.cost), (left + 110, 243.1), 20)

        if self.battle.player_turn:
            pygame.draw.rect(surface, DARKGRAY, END_TURN_BUTTON)
            self._text(surface, "End Turn", (320, 615), 20)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            display = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                if self.player.hp <= 0:
                    self.screen = Screen.GAME_OVER
                self.draw(display)
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="spirecards", description="A small deck-building battle.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    parser.add_argument("--seed", type=int, default=None, help="seed for card draws")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    GameApp(assets_dir=args.assets, rng=rng).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())