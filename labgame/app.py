"""The game window: frame timing, a following camera, key handling and the main loop."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, List, Optional, Tuple, Union

from labgame.gfx import Font, Frame, load_font
from labgame.lab import DEFAULT_LEVEL, DRAWN_ROWS, Cell, Labyrinth, Vec, load_labyrinth

ESCAPE = 27
DEFAULT_ZOOM = 3
ZOOM_MIN = 1
ZOOM_MAX = 13
CAMERA_OFFSET = 3
FPS_INTERVAL = 0.3

WINDOW_SIZE = (800, 800)
WINDOW_TITLE = "LAB3D GAME"
DEFAULT_FONT = "MyFont.FNT"
DEATH_MESSAGE = "You are loose! LOOSER! :)"

_BACKGROUND = (76, 120, 204)
_CELL_PX = 20
_SCENE_COLORS = {
    Cell.EMPTY: (255, 255, 0),
    Cell.WALL: (255, 128, 0),
    Cell.ENEMY: (255, 0, 0),
}
_AVATAR_COLOR = (0, 255, 0)


@dataclass
class Timer:
    """Frame clock: time since start, time since the last frame and frames per second."""

    fps_interval: float = FPS_INTERVAL
    delta_time: float = 0.0
    sync_time: float = 0.0
    fps: float = 0.0
    _start: Optional[float] = field(default=None, repr=False)
    _fps_time: float = field(default=0.0, repr=False)
    _old_time: float = field(default=0.0, repr=False)
    _frames: int = field(default=0, repr=False)

    def tick(self, t: float) -> bool:
        """Account for a frame at moment ``t`` (seconds); return True when ``fps`` was refreshed."""
        if self._start is None:
            self._start = self._fps_time = self._old_time = t
        self.delta_time = t - self._old_time
        self.sync_time = t - self._start
        self._frames += 1
        refreshed = False
        if t - self._fps_time > self.fps_interval:
            self.fps = self._frames / (t - self._fps_time)
            self._fps_time = t
            self._frames = 0
            refreshed = True
        self._old_time = t
        return refreshed


@dataclass
class Camera:
    """A point that eases towards a target on the grid plane."""

    x: Optional[float] = None
    y: Optional[float] = None

    def follow(self, target: Vec, dt: float) -> Tuple[float, float]:
        """Move a ``dt`` share of the way to ``target``; start a little behind it."""
        if self.x is None or self.y is None:
            self.x = float(target.x - CAMERA_OFFSET)
            self.y = float(target.y - CAMERA_OFFSET)
        self.x += dt * (target.x - self.x)
        self.y += dt * (target.y - self.y)
        return self.x, self.y

    @property
    def look_at(self) -> Tuple[float, float, float]:
        """The point the camera looks at."""
        return (self.x or 0.0, 1.0, self.y or 0.0)

    @property
    def eye(self) -> Tuple[float, float, float]:
        """The camera position, above and behind the look-at point."""
        x, _, z = self.look_at
        return (x + 10.0, 25.0, z + 10.0)


class Game:
    """Game state shared by the window: level, overlay frame, zoom, clock and camera."""

    def __init__(
        self,
        loader: Callable[[], Labyrinth],
        font: Optional[Font] = None,
        zoom: int = DEFAULT_ZOOM,
    ) -> None:
        if not ZOOM_MIN <= zoom <= ZOOM_MAX:
            raise ValueError(f"zoom must be in {ZOOM_MIN}..{ZOOM_MAX}, got {zoom}")
        self._loader = loader
        self.labyrinth = loader()
        self.font = font if font is not None else Font()
        self.frame = Frame()
        self.zoom = zoom
        self.timer = Timer()
        self.camera = Camera()
        self.running = True
        self.deaths = 0
        self.messages: List[str] = []

    def _restart(self) -> None:
        self.deaths += 1
        self.messages.append(DEATH_MESSAGE)
        self.labyrinth = self._loader()

    def _resize_frame(self) -> None:
        self.frame.resize(self.frame.width, self.frame.height)

    def key(self, key: Union[str, int]) -> None:
        """Handle a pressed key: movement, door, zoom and Escape to quit."""
        if isinstance(key, int):
            key = chr(key)
        if len(key) != 1:
            return
        if self.labyrinth.move(key):
            self._restart()
        if ord(key) == ESCAPE:
            self.running = False
            return
        if key in "=+" and self.zoom < ZOOM_MAX:
            self.zoom += 1
            self._resize_frame()
        if key in "_-" and self.zoom > ZOOM_MIN:
            self.zoom -= 1
            self._resize_frame()

    def update(self, now: float) -> bool:
        """Advance one frame at moment ``now``; return True when the avatar was caught."""
        self.timer.tick(now)
        self.camera.follow(self.labyrinth.avatar, self.timer.delta_time)
        self.labyrinth.ai_step(now)
        caught = self.labyrinth.is_dead()
        if caught:
            self._restart()
        self.frame.clear_black()
        self.labyrinth.draw(self.frame)
        self.frame.print_time(self.font)
        return caught


def _frame_rgba(frame: Frame) -> bytes:
    data = bytearray()
    for y in range(frame.height):
        for x in range(frame.width):
            argb = frame.pixel(x, y)
            data += bytes(((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF))
    return bytes(data)


def _draw_scene(pygame, screen, game: Game, now: float) -> None:
    width, height = screen.get_size()
    cx, _, cz = game.camera.look_at
    for y, row in enumerate(game.labyrinth.cells[:DRAWN_ROWS]):
        for x, value in enumerate(row):
            left = width / 2 + (x - cx - 0.5) * _CELL_PX
            top = height / 2 + (y - cz - 0.5) * _CELL_PX
            rect = pygame.Rect(round(left), round(top), _CELL_PX, _CELL_PX)
            if value == Cell.AVATAR:
                pygame.draw.rect(screen, _SCENE_COLORS[Cell.EMPTY], rect)
                lift = abs(math.sin(now * 5)) * 2 + 0.5
                radius = round(_CELL_PX / 2 * (1 + lift / 4))
                pygame.draw.circle(screen, _AVATAR_COLOR, rect.center, radius)
            else:
                pygame.draw.rect(screen, _SCENE_COLORS[value], rect)
                if value != Cell.EMPTY:
                    pygame.draw.rect(screen, (0, 0, 0), rect, 1)


def _draw_overlay(pygame, screen, game: Game) -> None:
    frame = game.frame
    size = (frame.width, frame.height)
    surface = pygame.image.frombuffer(_frame_rgba(frame), size, "RGBA")
    scaled = pygame.transform.scale(surface, (size[0] * game.zoom, size[1] * game.zoom))
    screen.blit(scaled, (0, 0))


def main(argv=None) -> int:
    """Open the game window and run until Escape or the window is closed."""
    parser = argparse.ArgumentParser(prog="labgame", description="Labyrinth chase game.")
    parser.add_argument("--level", default=DEFAULT_LEVEL, help="labyrinth file")
    parser.add_argument("--font", default=DEFAULT_FONT, help="8x16 raw bitmap font file")
    args = parser.parse_args(argv)

    try:
        game = Game(partial(load_labyrinth, args.level), load_font(args.font))
    except OSError:
        print("FAIL!")
        return 1

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        start = time.perf_counter()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        game.key(ESCAPE)
                    elif event.unicode:
                        game.key(event.unicode)
                elif event.type == pygame.VIDEORESIZE:
                    game.frame.resize(game.frame.width, game.frame.height)
            if not game.running:
                break
            now = time.perf_counter() - start
            game.update(now)
            if game.timer.fps and game.timer.delta_time >= 0:
                pygame.display.set_caption(f"{WINDOW_TITLE} FPS: {game.timer.fps:.3f}")
            screen.fill(_BACKGROUND)
            _draw_scene(pygame, screen, game, now)
            _draw_overlay(pygame, screen, game)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0