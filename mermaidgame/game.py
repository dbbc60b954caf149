"""The game world and the window that shows it."""

from __future__ import annotations

import enum
import logging
import random

import pygame

from .collectibles import Flower, Heart, Seashell, Sword
from .fish import HarmlessFish, KillerFish
from .mermaid import Mermaid

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 600
FRAME_DELAY_MS = 200
END_SCREEN_MS = 5000
FONT_FILE = "VT323-Regular.ttf"
FONT_SIZE = 24
MUSIC_FILE = "Sakura-Girl-Beach-chosic.com_.mp3"

TEXTURE_FILES = {
    "killer": "killerfish.png",
    "harmless": "fish2.png",
    "seashell": "seashellnew.png",
    "mermaid": "mermaid.png",
    "heart": "lives.png",
    "sword": "sword.png",
    "flower": "flower.png",
    "background": "underwater.jpg",
    "game_over": "Game Over.png",
    "win": "WinningScreen.png",
}
OPTIONAL_TEXTURE_FILES = {"start": "Game Start.png"}

logger = logging.getLogger(__name__)


class GameError(Exception):
    """Raised when the window, font, sound or media cannot be set up."""


class Outcome(enum.Enum):
    RUNNING = "running"
    QUIT = "quit"
    WON = "won"
    LOST = "lost"


def _blit_full(surface, texture):
    if texture is None:
        return
    if texture.get_size() != surface.get_size():
        texture = pygame.transform.scale(texture, surface.get_size())
    surface.blit(texture, (0, 0))


class World:
    """Everything in the sea, the spawn timers and the rules of the game."""

    KILLER_INTERVAL = 3000
    HARMLESS_INTERVAL = 5000
    KILLER_COOLDOWN = 3000
    WINNING_SCORE = 100
    SWORD_SCORE = 20

    def __init__(self, rng=None, now=0):
        self.rng = rng if rng is not None else random.Random()
        self.mermaid = Mermaid(500, 300)
        self.killer_fish = []
        self.harmless_fish = []
        self.seashells = []
        self.flowers = []
        self.swords = []
        self.hearts = [
            Heart().create(910 + 20 * i, 40) for i in range(self.mermaid.lives)
        ]

        self.now = now
        self.last_killer_spawn = now
        self.last_harmless_spawn = now
        self.last_sword_spawn = now
        self.sword_interval = 5000
        self.last_seashell_spawn = now
        self.seashell_interval = self._short_interval()
        self.last_flower_spawn = now
        self.flower_interval = self._short_interval()
        self.last_killer_collision = 0

        self.sword_collected = False
        self.in_start_screen = True
        self.last_event = None
        self.outcome = Outcome.RUNNING

    def _short_interval(self):
        return self.rng.randrange(10000) + 3000

    def _position(self, margin_y=50):
        return (
            self.rng.randrange(SCREEN_WIDTH - 50),
            self.rng.randrange(SCREEN_HEIGHT - margin_y),
        )

    def spawn(self, now):
        """Add whatever new items and fish are due at time ``now`` (ms)."""
        self.now = now
        if now - self.last_seashell_spawn >= self.seashell_interval:
            self.last_seashell_spawn = now
            self.seashells.append(Seashell().create(*self._position()))
            self.seashell_interval = self._short_interval()

        if now - self.last_flower_spawn >= self.flower_interval:
            self.last_flower_spawn = now
            self.flowers.append(Flower().create(*self._position()))
            self.flower_interval = self._short_interval()

        if now - self.last_killer_spawn >= self.KILLER_INTERVAL:
            self.last_killer_spawn = now
            self.killer_fish.append(KillerFish(self.rng))

        if now - self.last_harmless_spawn >= self.HARMLESS_INTERVAL:
            self.last_harmless_spawn = now
            self.harmless_fish.append(HarmlessFish(self.rng))

        if (
            self.mermaid.score >= self.SWORD_SCORE
            and now - self.last_sword_spawn >= self.sword_interval
        ):
            self.last_sword_spawn = now
            self.swords.append(Sword().create(*self._position()))
            self.sword_interval = self.rng.randrange(10000) + 30000

    def handle_events(self, events):
        """Process queued events; returns the outcome so far."""
        for event in events:
            self.last_event = event
            if self.in_start_screen and event.type == pygame.MOUSEBUTTONDOWN:
                self.in_start_screen = False
            if event.type == pygame.QUIT:
                self.outcome = Outcome.QUIT
        return self.outcome

    def update(self):
        """Steer the mermaid with the latest event and move everything one step."""
        if self.last_event is not None:
            self.mermaid.handle_input(self.last_event)
        for fish in self.killer_fish:
            fish.update()
        for fish in self.harmless_fish:
            fish.update()
        self.mermaid.update(self.now)

    def _touches(self, item):
        return self.mermaid.check_collision(self.mermaid.rect, item.rect)

    def resolve_collisions(self, now):
        """Apply the effects of the mermaid touching fish and items."""
        self.now = now
        hit = next((f for f in self.killer_fish if self._touches(f)), None)
        if hit is not None and now - self.last_killer_collision >= self.KILLER_COOLDOWN:
            self.last_killer_collision = now
            logger.info("Collision between Mermaid and KillerFish!")
            self.killer_fish.remove(hit)
            if self.sword_collected:
                self.mermaid.increase_score(15)
                self.sword_collected = False
            else:
                self.mermaid.decrease_lives()
                if self.hearts:
                    self.hearts.pop()
                logger.info("Lives Left: %d", self.mermaid.lives)
                if self.mermaid.lives <= 0 and self.outcome is Outcome.RUNNING:
                    self.outcome = Outcome.LOST

        for shell in [s for s in self.seashells if self._touches(s)]:
            logger.info("Collision between Mermaid and Seashell!")
            self.mermaid += 5
            self.seashells.remove(shell)

        for flower in [f for f in self.flowers if self._touches(f)]:
            logger.info("Collision between Mermaid and Flower!")
            self.mermaid += 1
            self.flowers.remove(flower)

        if self.swords and self._touches(self.swords[0]):
            logger.info("Collision between Mermaid and Sword!")
            self.swords.clear()
            self.sword_collected = True

    def step(self, now, events):
        """Run one frame of the game at time ``now`` and return the outcome."""
        self.now = now
        if self.handle_events(events) is not Outcome.RUNNING:
            return self.outcome
        if self.in_start_screen:
            return self.outcome
        self.spawn(now)
        self.update()
        if self.mermaid.score >= self.WINNING_SCORE:
            self.outcome = Outcome.WON
        self.resolve_collisions(now)
        return self.outcome

    def draw(self, surface, textures, font):
        """Draw the start screen or the sea with everything in it."""
        if self.in_start_screen:
            _blit_full(surface, textures.get("start"))
            return
        surface.fill((255, 255, 255))
        _blit_full(surface, textures["background"])

        text = font.render(f"Score: {self.mermaid.score}", False, (255, 255, 255))
        surface.blit(text, (surface.get_width() - text.get_width() - 10, 10))

        for fish in self.killer_fish:
            fish.draw(surface, textures["killer"])
        for fish in self.harmless_fish:
            fish.draw(surface, textures["harmless"])
        for shell in self.seashells:
            shell.draw(surface, textures["seashell"])
        self.mermaid.draw(surface, textures["mermaid"])
        for heart in self.hearts:
            heart.draw(surface, textures["heart"])
        for sword in self.swords:
            sword.draw(surface, textures["sword"])
        for flower in self.flowers:
            flower.draw(surface, textures["flower"])


class Game:
    """The window, its media and the main loop."""

    def __init__(self):
        self.screen = None
        self.font = None
        self.textures = {}
        self.music_loaded = False
        self.world = None

    def init(self):
        """Open the window, load the font and start the mixer."""
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise GameError(f"Window could not be created: {exc}") from exc
        pygame.display.set_caption("Mermaid Game")

        try:
            pygame.font.init()
            self.font = pygame.font.Font(FONT_FILE, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            raise GameError(f"Failed to load font: {exc}") from exc

        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            raise GameError(f"Sound could not be initialised: {exc}") from exc

    def load_texture(self, path):
        """Load an image file, raising GameError if it cannot be read."""
        try:
            image = pygame.image.load(path)
        except (OSError, pygame.error) as exc:
            raise GameError(f"Unable to load image {path}: {exc}") from exc
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def load_media(self):
        """Load every texture and start the background music."""
        failures = []
        for name, path in TEXTURE_FILES.items():
            try:
                self.textures[name] = self.load_texture(path)
            except GameError as exc:
                logger.error("%s", exc)
                failures.append(path)
        for name, path in OPTIONAL_TEXTURE_FILES.items():
            try:
                self.textures[name] = self.load_texture(path)
            except GameError as exc:
                logger.warning("%s", exc)
        if failures:
            raise GameError(f"Unable to load: {', '.join(failures)}")

        try:
            pygame.mixer.music.load(MUSIC_FILE)
        except (OSError, pygame.error) as exc:
            raise GameError(f"Failed to load background music: {exc}") from exc
        self.music_loaded = True
        pygame.mixer.music.play(-1)

    def _show_end_screen(self, texture):
        self.screen.fill((255, 255, 255))
        _blit_full(self.screen, texture)
        pygame.display.flip()
        pygame.time.delay(END_SCREEN_MS)

    def run(self):
        """Play until the window is closed, the player wins or loses."""
        self.world = World(now=pygame.time.get_ticks())
        while True:
            outcome = self.world.step(pygame.time.get_ticks(), pygame.event.get())
            if outcome is Outcome.QUIT:
                break
            if self.world.in_start_screen:
                self.world.draw(self.screen, self.textures, self.font)
                pygame.display.flip()
                continue
            if outcome is Outcome.WON:
                self._show_end_screen(self.textures.get("win"))
                break
            if outcome is Outcome.LOST:
                self._show_end_screen(self.textures.get("game_over"))
                break
            self.world.draw(self.screen, self.textures, self.font)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)

    def close(self):
        """Release media and shut pygame down."""
        if self.music_loaded and pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self.music_loaded = False
        self.textures.clear()
        self.font = None
        self.screen = None
        pygame.quit()