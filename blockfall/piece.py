"""A falling tetromino: its type, position and rotation state."""

from __future__ import annotations

from dataclasses import dataclass, field

from .shapes import BlockType, Rotation, RotationDirection, ShapeTemplate, Vec2, template_for


@dataclass
class Piece:
    """A tetromino placed on the board."""

    block_type: BlockType
    pos: Vec2
    rot_state: int = 0
    template: ShapeTemplate = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.template is None:
            self.template = template_for(self.block_type)

    def absolute_block_positions(self) -> Rotation:
        """Board coordinates of the four blocks at the current position and rotation."""
        return self.absolute_block_positions_at(self.pos, self.rot_state)

    def absolute_block_positions_at(self, position: Vec2, rotation_state: int) -> Rotation:
        """Board coordinates of the four blocks at the given position and rotation."""
        relative = self.template.rotations[rotation_state]
        return tuple(position + offset for offset in relative)  # type: ignore[return-value]

    def absolute_pivot_position(self) -> Vec2:
        return self.pos + self.template.pivot_offset

    def next_rotation_state(self, direction: RotationDirection) -> int:
        """Rotation state reached by turning once in the given direction."""
        if direction is RotationDirection.CLOCKWISE:
            return (self.rot_state + 1) % 4
        return (self.rot_state + 3) % 4