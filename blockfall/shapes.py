"""Block types, rotation directions and the static tetromino shape data."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An integer 2D vector; x grows rightwards, y grows downwards."""

    x: int
    y: int

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)


class BlockType(enum.IntEnum):
    """Kind of block; the value is the integer code used in grid data."""

    I = 0  # noqa: E741  cyan
    J = 1  # blue
    L = 2  # orange
    O = 3  # noqa: E741  yellow
    S = 4  # green
    T = 5  # purple
    Z = 6  # red
    EMPTY = 7

    @classmethod
    def from_index(cls, index: int) -> BlockType:
        """Return the tetromino type for index 0..6; raise ValueError otherwise."""
        if not 0 <= index <= 6:
            raise ValueError(f"invalid piece type index: {index}")
        return cls(index)


class RotationDirection(enum.Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


Rotation = tuple[Vec2, Vec2, Vec2, Vec2]


@dataclass(frozen=True)
class ShapeTemplate:
    """Block offsets of a tetromino for each of its four rotation states."""

    block_type: BlockType
    rotations: tuple[Rotation, Rotation, Rotation, Rotation]
    pivot_offset: Vec2


def _rot(*coords: tuple[int, int]) -> Rotation:
    return tuple(Vec2(x, y) for x, y in coords)  # type: ignore[return-value]


# Offsets are relative to the top-left corner of the shape's bounding box.
_O_ROTATION = _rot((0, 0), (1, 0), (0, 1), (1, 1))
_O_ROTATIONS = (_O_ROTATION,) * 4

_I_HORIZONTAL = _rot((0, 1), (1, 1), (2, 1), (3, 1))
_I_VERTICAL = _rot((2, 0), (2, 1), (2, 2), (2, 3))
_I_ROTATIONS = (_I_HORIZONTAL, _I_VERTICAL, _I_HORIZONTAL, _I_VERTICAL)

_J_ROTATIONS = (
    _rot((0, 0), (0, 1), (1, 1), (2, 1)),
    _rot((1, 0), (2, 0), (1, 1), (1, 2)),
    _rot((0, 1), (1, 1), (2, 1), (2, 2)),
    _rot((1, 0), (1, 1), (0, 2), (1, 2)),
)

_L_ROTATIONS = (
    _rot((2, 0), (0, 1), (1, 1), (2, 1)),
    _rot((1, 0), (1, 1), (1, 2), (2, 2)),
    _rot((0, 1), (1, 1), (2, 1), (0, 2)),
    _rot((0, 0), (1, 0), (1, 1), (1, 2)),
)

_S_FLAT = _rot((1, 0), (2, 0), (0, 1), (1, 1))
_S_UPRIGHT = _rot((0, 0), (0, 1), (1, 1), (1, 2))
_S_ROTATIONS = (_S_FLAT, _S_UPRIGHT, _S_FLAT, _S_UPRIGHT)

_T_ROTATIONS = (
    _rot((0, 1), (1, 1), (2, 1), (1, 0)),
    _rot((1, 0), (1, 1), (1, 2), (2, 1)),
    _rot((0, 1), (1, 1), (2, 1), (1, 2)),
    _rot((1, 0), (1, 1), (1, 2), (0, 1)),
)

_Z_FLAT = _rot((0, 0), (1, 0), (1, 1), (2, 1))
_Z_UPRIGHT = _rot((2, 0), (1, 1), (2, 1), (1, 2))
_Z_ROTATIONS = (_Z_FLAT, _Z_UPRIGHT, _Z_FLAT, _Z_UPRIGHT)

PIVOT_ORIGIN = Vec2(0, 0)
PIVOT_1X1 = Vec2(1, 1)

SHAPE_TEMPLATES: dict[BlockType, ShapeTemplate] = {
    template.block_type: template
    for template in (
        ShapeTemplate(BlockType.I, _I_ROTATIONS, PIVOT_1X1),
        ShapeTemplate(BlockType.J, _J_ROTATIONS, PIVOT_1X1),
        ShapeTemplate(BlockType.L, _L_ROTATIONS, PIVOT_1X1),
        ShapeTemplate(BlockType.O, _O_ROTATIONS, PIVOT_ORIGIN),
        ShapeTemplate(BlockType.S, _S_ROTATIONS, PIVOT_1X1),
        ShapeTemplate(BlockType.T, _T_ROTATIONS, PIVOT_1X1),
        ShapeTemplate(BlockType.Z, _Z_ROTATIONS, PIVOT_1X1),
    )
}


def template_for(block_type: BlockType) -> ShapeTemplate:
    """Return the shape template of a tetromino type; raise ValueError for EMPTY."""
    try:
        return SHAPE_TEMPLATES[block_type]
    except KeyError:
        raise ValueError(f"unknown block type: {block_type!r}") from None