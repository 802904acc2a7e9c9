"""Components attached to scene entities."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from luthcore.ids import UUID
from luthcore.mathutils import (
    ortho,
    perspective,
    quat_from_euler,
    quat_to_mat4,
    scale_matrix,
    translation_matrix,
)

if TYPE_CHECKING:
    from luthcore.entity import Entity


def _vec3(*values: float):
    return lambda: np.array(values, dtype=np.float64)


@dataclass
class ID:
    """A persistent identifier."""

    uuid: UUID = field(default_factory=UUID)


@dataclass
class Tag:
    """The display name of an entity."""

    tag: str = ""


@dataclass
class Parent:
    """The entity this one hangs below."""

    parent: Optional["Entity"] = None


@dataclass
class Children:
    """The entities hanging below this one."""

    children: list = field(default_factory=list)


@dataclass(eq=False)
class Transform:
    """Local position, Euler rotation in degrees, and scale."""

    position: np.ndarray = field(default_factory=_vec3(0.0, 0.0, 0.0))
    rotation: np.ndarray = field(default_factory=_vec3(0.0, 0.0, 0.0))
    scale: np.ndarray = field(default_factory=_vec3(1.0, 1.0, 1.0))

    def matrix(self) -> np.ndarray:
        """The local transform as ``T @ R @ S``."""
        rotation = quat_to_mat4(quat_from_euler(np.radians(np.asarray(self.rotation, dtype=float))))
        return translation_matrix(self.position) @ rotation @ scale_matrix(self.scale)


@dataclass(eq=False)
class WorldTransform:
    """The transform in world space, combined through the parent chain."""

    matrix: np.ndarray = field(default_factory=lambda: np.eye(4))


class ProjectionType(enum.Enum):
    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


@dataclass(eq=False)
class Camera:
    """A perspective or orthographic camera."""

    projection: ProjectionType = ProjectionType.PERSPECTIVE
    vertical_fov: float = 45.0
    near_clip: float = 0.01
    far_clip: float = 1000.0
    orthographic_size: float = 10.0
    orthographic_near: float = -1.0
    orthographic_far: float = 1.0
    aspect_ratio: float = 16.0 / 9.0
    view_matrix: np.ndarray = field(default_factory=lambda: np.eye(4))
    projection_matrix: np.ndarray = field(default_factory=lambda: np.eye(4))

    def set_perspective(self, vertical_fov, near_clip, far_clip) -> None:
        """Switch to perspective projection; ``vertical_fov`` is in degrees."""
        self.projection = ProjectionType.PERSPECTIVE
        self.vertical_fov = vertical_fov
        self.near_clip = near_clip
        self.far_clip = far_clip
        self.recalculate_projection()

    def set_orthographic(self, size, near_clip, far_clip) -> None:
        """Switch to orthographic projection with ``size`` as the view height."""
        self.projection = ProjectionType.ORTHOGRAPHIC
        self.orthographic_size = size
        self.orthographic_near = near_clip
        self.orthographic_far = far_clip
        self.recalculate_projection()

    def recalculate_projection(self) -> None:
        """Rebuild ``projection_matrix`` from the current settings."""
        if self.projection is ProjectionType.PERSPECTIVE:
            self.projection_matrix = perspective(
                np.radians(self.vertical_fov), self.aspect_ratio, self.near_clip, self.far_clip
            )
        else:
            half_height = self.orthographic_size * 0.5
            half_width = self.orthographic_size * self.aspect_ratio * 0.5
            self.projection_matrix = ortho(
                -half_width,
                half_width,
                -half_height,
                half_height,
                self.orthographic_near,
                self.orthographic_far,
            )

    def view_projection(self, transform) -> np.ndarray:
        """Projection times the inverse of the camera's world transform."""
        return self.projection_matrix @ np.linalg.inv(np.asarray(transform, dtype=np.float64))


@dataclass
class MeshRenderer:
    """Which model mesh and material to draw."""

    model_uuid: UUID = field(default_factory=UUID)
    mesh_index: int = 0
    material_uuid: UUID = field(default_factory=UUID)
    is_skinned: bool = False
    model_name_preview: str = ""
    material_name_preview: str = ""


@dataclass
class Animation:
    """Which animation of a skinned model to play."""

    model_uuid: UUID = field(default_factory=UUID)
    animation_index: int = 0


@dataclass(eq=False)
class DirectionalLight:
    color: np.ndarray = field(default_factory=_vec3(1.0, 1.0, 1.0))
    intensity: float = 1.0


@dataclass(eq=False)
class PointLight:
    color: np.ndarray = field(default_factory=_vec3(1.0, 1.0, 1.0))
    intensity: float = 1.0
    range: float = 350.0