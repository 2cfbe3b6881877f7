"""The labyrinth: grid loading, enemy path finding, avatar moves and the 2D map."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from os import PathLike
from typing import Iterator, List, Optional, Protocol, Union

from labgame.gfx import Frame

SIZE = 50
MAX_ENEMIES = 8
DRAWN_ROWS = SIZE - 20

AVATAR_COLOR = 0xFF00FF00
ENEMY_COLOR = 0xFFFF0000
WALL_COLOR = 0x7FFFFFFF
FLOOR_COLOR = 0x3F000000

DEFAULT_LEVEL = "LAB1.LB"


class _Random(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Cell(IntEnum):
    """Content of one labyrinth square."""

    EMPTY = 0
    WALL = 1
    AVATAR = 2
    ENEMY = 3


@dataclass(frozen=True)
class Vec:
    """Grid position: ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0

    def inside(self) -> bool:
        return 0 <= self.x < SIZE and 0 <= self.y < SIZE


@dataclass
class Enemy:
    """A hunter that steps towards the avatar every ``delta_time`` seconds."""

    pos: Vec
    delta_time: float
    latest_time: float = 0.0


# Right, down, left, up: the order in which neighbours are tried.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

_MOVES = {"w": (0, -1), "a": (-1, 0), "s": (0, 1), "d": (1, 0)}

DOOR = Vec(18, 15)


def _empty_grid() -> List[List[Cell]]:
    return [[Cell.EMPTY] * SIZE for _ in range(SIZE)]


def _neighbours(pos: Vec) -> Iterator[Vec]:
    for dx, dy in _DIRECTIONS:
        step = Vec(pos.x + dx, pos.y + dy)
        if step.inside():
            yield step


@dataclass
class Labyrinth:
    """A SIZE x SIZE grid with one avatar and a few enemies."""

    cells: List[List[Cell]] = field(default_factory=_empty_grid)
    avatar: Vec = field(default_factory=Vec)
    enemies: List[Enemy] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.cells) != SIZE or any(len(row) != SIZE for row in self.cells):
            raise ValueError(f"the grid must be {SIZE}x{SIZE}")
        if not self.avatar.inside():
            raise ValueError(f"avatar {self.avatar} is outside the grid")

    def cell(self, pos: Vec) -> Cell:
        """Return the content of a square."""
        return self.cells[pos.y][pos.x]

    def _set(self, pos: Vec, value: Cell) -> None:
        self.cells[pos.y][pos.x] = value

    def solution(self) -> List[List[int]]:
        """Return step counts to the avatar for every square, -1 where unreachable.

        Walls and enemies are never given a count.
        """
        sol = [[-1] * SIZE for _ in range(SIZE)]
        sol[self.avatar.y][self.avatar.x] = 0
        for _ in range(SIZE * SIZE):
            changed = False
            for x in range(SIZE):
                for y in range(SIZE):
                    if sol[y][x] >= 0 or self.cells[y][x] in (Cell.WALL, Cell.ENEMY):
                        continue
                    value = -1
                    for n in _neighbours(Vec(x, y)):
                        if sol[n.y][n.x] >= 0:
                            value = sol[n.y][n.x] + 1
                    if value >= 0:
                        sol[y][x] = value
                        changed = True
            if not changed:
                break
        return sol

    def ai_step(self, now: float) -> None:
        """Move every enemy whose delay has passed one square towards the avatar."""
        for enemy in self.enemies:
            if now - enemy.latest_time <= enemy.delta_time:
                continue
            sol = self.solution()
            enemy.latest_time = now
            steps = [
                n for n in _neighbours(enemy.pos)
                if sol[n.y][n.x] >= 0 and self.cell(n) != Cell.WALL
            ]
            if not steps:
                continue
            target = min(steps, key=lambda n: sol[n.y][n.x])
            self._set(enemy.pos, Cell.EMPTY)
            enemy.pos = target
            self._set(target, Cell.ENEMY)

    def is_dead(self) -> bool:
        """Tell whether an enemy stands on the avatar's square."""
        return any(enemy.pos == self.avatar for enemy in self.enemies)

    def move(self, key: Union[str, int]) -> bool:
        """Handle a key press; return True when the avatar walked into an enemy.

        W/A/S/D move the avatar, V toggles the door; other keys do nothing.
        """
        if isinstance(key, int):
            key = chr(key)
        key = key.lower()
        if key == "v":
            self.toggle_door()
            return False
        if key not in _MOVES:
            return False
        dx, dy = _MOVES[key]
        target = Vec(self.avatar.x + dx, self.avatar.y + dy)
        if not target.inside() or self.cell(target) not in (Cell.EMPTY, Cell.ENEMY):
            return False
        self._set(self.avatar, Cell.EMPTY)
        self.avatar = target
        if self.is_dead():
            return True
        self._set(target, Cell.AVATAR)
        return False

    def toggle_door(self) -> None:
        """Open the door square if it is a wall, close it if it is empty."""
        current = self.cell(DOOR)
        if current == Cell.WALL:
            self._set(DOOR, Cell.EMPTY)
        elif current == Cell.EMPTY:
            self._set(DOOR, Cell.WALL)

    def draw(self, frame: Frame) -> None:
        """Paint the top rows of the grid into a frame, one pixel per square."""
        colors = {
            Cell.AVATAR: AVATAR_COLOR,
            Cell.ENEMY: ENEMY_COLOR,
            Cell.WALL: WALL_COLOR,
            Cell.EMPTY: FLOOR_COLOR,
        }
        for y, row in enumerate(self.cells[:DRAWN_ROWS]):
            for x, value in enumerate(row):
                frame.put_pixel(x, y, colors[value])


def parse_labyrinth(text: str, rng: Optional[_Random] = None) -> Labyrinth:
    """Build a labyrinth from its text form.

    '*' is a wall, 'a' the avatar, 'e' an enemy (at most MAX_ENEMIES), a
    newline starts the next row and any other character is floor.  Squares
    beyond the grid are ignored.
    """
    if rng is None:
        rng = random.Random()
    cells = _empty_grid()
    avatar = Vec()
    enemies: List[Enemy] = []
    x = y = 0
    for ch in text:
        pos = Vec(x, y)
        fits = y < SIZE and x < SIZE
        if ch == "\n":
            y += 1
            x = 0
            continue
        if ch == "a":
            if fits:
                cells[y][x] = Cell.AVATAR
            avatar = pos
        elif ch == "e":
            if fits and len(enemies) < MAX_ENEMIES:
                cells[y][x] = Cell.ENEMY
                enemies.append(Enemy(pos, rng.randint(1, 10) / 3))
        elif fits:
            cells[y][x] = Cell.WALL if ch == "*" else Cell.EMPTY
        x += 1
    return Labyrinth(cells, avatar, enemies)


def load_labyrinth(
    path: Union[str, PathLike] = DEFAULT_LEVEL, rng: Optional[_Random] = None
) -> Labyrinth:
    """Read and parse a labyrinth file."""
    with open(path, encoding="latin-1") as stream:
        return parse_labyrinth(stream.read(), rng)


__all__ = [
    "Cell",
    "Vec",
    "Enemy",
    "Labyrinth",
    "parse_labyrinth",
    "load_labyrinth",
    "replace",
]