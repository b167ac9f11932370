"""View-frustum construction and culling of chunks against it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from orangevox.geometry import AABB, Plane, Sphere

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
Line = tuple[Vec3, Vec3, Vec4, Vec4]

_CHUNK_SIZE = 16
_CHUNK_HALF_EXTENT = 8.0

EDGE_COLOR: Vec4 = (0.0, 1.0, 0.0, 1.0)
NORMAL_START_COLOR: Vec4 = (1.0, 0.0, 0.0, 1.0)
NORMAL_END_COLOR: Vec4 = (0.0, 0.0, 1.0, 1.0)
AABB_COLOR: Vec4 = (1.0, 0.0, 0.0, 1.0)


class FrustumPlane(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3
    FRONT = 4
    BACK = 5


class FrustumVertex(IntEnum):
    """Frustum corners: top/bottom, left/right, near/far."""

    TLN = 0
    TRN = 1
    BLN = 2
    BRN = 3
    TLF = 4
    TRF = 5
    BLF = 6
    BRF = 7


def _vec3(v) -> Vec3:
    return (float(v[0]), float(v[1]), float(v[2]))


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _default_planes() -> dict[FrustumPlane, Plane]:
    return {plane: Plane((0.0, 0.0, 0.0), 0.0) for plane in FrustumPlane}


def _default_vertices() -> dict[FrustumVertex, Vec3]:
    return {vertex: (0.0, 0.0, 0.0) for vertex in FrustumVertex}


@dataclass
class Frustum:
    """Six inward-facing planes and eight corner points."""

    planes: dict[FrustumPlane, Plane] = field(default_factory=_default_planes)
    vertices: dict[FrustumVertex, Vec3] = field(default_factory=_default_vertices)


def chunk_pos_to_aabb(chunk_pos_ws: Vec3) -> AABB:
    """Bounding box of the chunk whose minimum corner is chunk_pos_ws (world space)."""
    half = _CHUNK_SIZE / 2.0
    return AABB(
        (chunk_pos_ws[0] + half, chunk_pos_ws[1] + half, chunk_pos_ws[2] + half),
        (_CHUNK_HALF_EXTENT, _CHUNK_HALF_EXTENT, _CHUNK_HALF_EXTENT),
    )


def test_sphere_against_plane(sphere: Sphere, plane: Plane) -> int:
    """1 if the sphere is wholly in front of the plane, -1 if wholly behind, 0 if it straddles."""
    distance = float(np.dot(sphere.center, plane.normal)) - plane.point
    if distance > sphere.radius:
        return 1
    if distance < -sphere.radius:
        return -1
    return 0


def test_aabb_against_plane(aabb: AABB, plane: Plane) -> int:
    """Classify a box against a plane the same way as a sphere."""
    radius = sum(e * abs(n) for e, n in zip(aabb.extent, plane.normal))
    return test_sphere_against_plane(Sphere(aabb.center, radius), plane)


def plane_from_points(a, b, c) -> Plane:
    """Plane through three points, with b as the corner the two edges leave from."""
    a, b, c = (np.asarray(p, dtype=float)[:3] for p in (a, b, c))
    normal = np.cross(_normalize(a - b), _normalize(c - b))
    return Plane(_vec3(normal), float(np.dot(normal, b)))


def aabb_lines(aabb: AABB) -> list[Line]:
    """Line segments outlining a box, face by face."""
    cx, cy, cz = aabb.center
    ex, ey, ez = aabb.extent
    tln = (cx - ex, cy + ey, cz - ez)
    trn = (cx + ex, cy + ey, cz - ez)
    bln = (cx - ex, cy - ey, cz - ez)
    brn = (cx + ex, cy - ey, cz - ez)
    tlf = (cx - ex, cy + ey, cz + ez)
    trf = (cx + ex, cy + ey, cz + ez)
    blf = (cx - ex, cy - ey, cz + ez)
    brf = (cx + ex, cy - ey, cz + ez)
    pairs = (
        (tln, trn), (trn, brn), (brn, bln), (bln, tln),  # front face
        (tlf, trf), (trf, brf), (brf, blf), (blf, tlf),  # back face
        (tln, trn), (trn, trf), (trf, tlf), (tlf, tln),  # top face
        (bln, brn), (brn, brf), (brf, blf), (blf, bln),  # bottom face
    )
    return [(start, end, AABB_COLOR, AABB_COLOR) for start, end in pairs]


class FrustumCulling:
    """Holds the current view frustum and tests chunks against it."""

    def __init__(self, frustum: Frustum | None = None) -> None:
        self.frustum = frustum if frustum is not None else Frustum()

    def calculate_frustum(
        self,
        fov: float,
        aspect_ratio: float,
        near_plane: float,
        far_plane: float,
        view_matrix,
        cam_pos: Vec3,
    ) -> None:
        """Rebuild the frustum from a camera transform whose rows are its right, up and forward axes."""
        matrix = np.asarray(view_matrix, dtype=float)
        right, up, forward = matrix[0, :3], matrix[1, :3], matrix[2, :3]
        camera = np.asarray(cam_pos, dtype=float)

        near_center = camera + forward * near_plane
        far_center = camera + forward * far_plane

        half_height_near = math.tan(fov / 2.0) * near_plane
        half_height_far = math.tan(fov / 2.0) * far_plane
        half_width_near = half_height_near * aspect_ratio
        half_width_far = half_height_far * aspect_ratio

        tln = near_center + up * half_height_near - right * half_width_near
        trn = near_center + up * half_height_near + right * half_width_near
        brn = near_center - up * half_height_near + right * half_width_near
        bln = near_center - up * half_height_near - right * half_width_near
        tlf = far_center + up * half_height_far - right * half_width_far
        trf = far_center + up * half_height_far + right * half_width_far
        brf = far_center - up * half_height_far + right * half_width_far
        blf = far_center - up * half_height_far - right * half_width_far

        planes = {
            FrustumPlane.FRONT: plane_from_points(brn, tln, trn),
            FrustumPlane.BACK: plane_from_points(brf, trf, tlf),
            FrustumPlane.LEFT: plane_from_points(blf, tlf, tln),
            FrustumPlane.RIGHT: plane_from_points(trn, trf, brf),
            FrustumPlane.TOP: plane_from_points(tlf, trf, trn),
            FrustumPlane.BOTTOM: plane_from_points(brf, blf, bln),
        }
        vertices = {
            FrustumVertex.BLF: _vec3(blf),
            FrustumVertex.BLN: _vec3(bln),
            FrustumVertex.BRF: _vec3(brf),
            FrustumVertex.BRN: _vec3(brn),
            FrustumVertex.TLF: _vec3(tlf),
            FrustumVertex.TLN: _vec3(tln),
            FrustumVertex.TRF: _vec3(trf),
            FrustumVertex.TRN: _vec3(trn),
        }
        self.frustum = Frustum(planes, vertices)

    def chunk_visible(self, chunk_pos_ws: Vec3) -> bool:
        """True unless the chunk lies wholly behind one of the planes; straddling chunks pass."""
        aabb = chunk_pos_to_aabb(chunk_pos_ws)
        return all(
            test_aabb_against_plane(aabb, plane) >= 0
            for plane in self.frustum.planes.values()
        )

    def frustum_lines(self) -> list[Line]:
        """The twelve frustum edges followed by one short line per plane showing its normal."""
        v = {key: np.asarray(value) for key, value in self.frustum.vertices.items()}
        V = FrustumVertex
        edges = (
            (V.TLN, V.TLF), (V.TRN, V.TRF), (V.BLN, V.BLF), (V.BRN, V.BRF),
            (V.TLN, V.TRN), (V.TRN, V.BRN), (V.BRN, V.BLN), (V.BLN, V.TLN),
            (V.TLF, V.TRF), (V.TRF, V.BRF), (V.BRF, V.BLF), (V.BLF, V.TLF),
        )
        lines: list[Line] = [
            (_vec3(v[a]), _vec3(v[b]), EDGE_COLOR, EDGE_COLOR) for a, b in edges
        ]

        def side_midpoint(near_a, near_b, far_a, far_b) -> np.ndarray:
            # Midpoint of a thin strip just beyond the near edge of a side plane.
            step_a = (v[far_a] - v[near_a]) / 100.0 + v[near_a]
            step_b = (v[far_b] - v[near_b]) / 100.0 + v[near_b]
            return (v[near_a] + v[near_b] + step_a + step_b) / 4.0

        midpoints = (
            (FrustumPlane.TOP, side_midpoint(V.TLN, V.TRN, V.TLF, V.TRF)),
            (FrustumPlane.BOTTOM, side_midpoint(V.BLN, V.BRN, V.BLF, V.BRF)),
            (FrustumPlane.LEFT, side_midpoint(V.BLN, V.TLN, V.BLF, V.TLF)),
            (FrustumPlane.RIGHT, side_midpoint(V.BRN, V.TRN, V.BRF, V.TRF)),
            (FrustumPlane.FRONT, (v[V.TLN] + v[V.TRN] + v[V.BRN] + v[V.BLN]) / 4.0),
            (FrustumPlane.BACK, (v[V.TLF] + v[V.TRF] + v[V.BRF] + v[V.BLF]) / 4.0),
        )
        for plane_id, midpoint in midpoints:
            normal = np.asarray(self.frustum.planes[plane_id].normal)
            lines.append(
                (_vec3(midpoint), _vec3(midpoint + normal), NORMAL_START_COLOR, NORMAL_END_COLOR)
            )
        return lines