"""Simulation settings, actor descriptions and numeric constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple

Vector3 = Tuple[float, float, float]

EPSILON = 1e-6
SCALAR_MAX = 3.4028234663852886e38


class ExtendMode(IntEnum):
    BOUNDARY = 0
    NEIGHBOR = 1
    NONMANIFOLD_EDGES = 2
    UV_ISLAND = 3


class SolverMode(IntEnum):
    QUALITY = 0
    SWIFT = 1
    UNKNOWN = 2


class Pipeline(IntEnum):
    SMPL = 0
    GLTF = 1
    UNIVERSAL = 2
    UNKNOWN = 3


class ExportFormat(IntEnum):
    ALEMBIC = 0
    OBJ_SEQUENCE = 1


class StretchMode(IntEnum):
    BASIC_STRETCH = 0
    FEM_STRAIN = 1


class BendingMode(IntEnum):
    BASIC_BENDING = 0
    FEM_ISOMETRIC = 1


@dataclass
class SkinParam:
    """Barycentric skinning of a node onto a triangle."""

    idx0: int = 0
    idx1: int = 0
    idx2: int = 0
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass
class BindingParam:
    """Binding of a node with a stiffness and rest distance."""

    idx: int = 0
    stiffness: float = 0.0
    distance: float = 0.0


@dataclass
class BasicFabricSettings:
    stretch_compliance: float = 0.0
    bend_compliance: float = 1e2
    relaxation_factor: float = 0.25
    long_range_stretchiness: float = 1.1
    geodesic_LRA: bool = False
    solve_bending: bool = True


@dataclass
class FEMFabricSettings:
    xx_stiffness: float = 1.0
    xy_stiffness: float = 1.0
    yy_stiffness: float = 1.0
    xy_poisson_ratio: float = 0.3
    yx_poisson_ratio: float = 0.3
    solve_bending: bool = True
    bending_stiffness: float = 1e0
    long_range_stretchiness: float = 1.1
    geodesic_LRA: bool = True


@dataclass
class ParticleCollisionSettings:
    friction: float = 0.1
    max_neighbor_size: int = 64
    inter_leaved_hash: int = 3
    enable_self_collision: bool = True
    particle_diameter: float = 1.3
    hash_cell_size: float = 1.5


@dataclass
class SMPLPipelineSettings:
    cloth_styles: List[str] = field(default_factory=list)
    npz_path: str = ""
    body_model: str = ""
    num_lerped_frames: int = 0
    enable_pose_blendshape: bool = False
    enable_collision_filter: bool = False
    amass_x_rotation: float = -90.0


@dataclass
class GLTFPipelineSettings:
    cloth_styles: List[str] = field(default_factory=list)
    character_name: str = ""
    gltf_path: str = ""
    num_lerped_frames: int = 0


class UniversalActorType(Enum):
    CLOTH = "cloth"
    OBSTACLE = "obstacle"


@dataclass
class UniversalActorConfig:
    """An actor of the universal pipeline: a mesh with its placement."""

    type: UniversalActorType = UniversalActorType.CLOTH
    name: str = ""
    mesh_path: str = ""
    fixed_nodes: List[int] = field(default_factory=list)
    position: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)


class GLTFActorType(Enum):
    CLOTH = "cloth"
    OBSTACLE = "obstacle"


@dataclass
class GLTFActorConfig:
    """An actor of the glTF pipeline: a mesh with its placement."""

    type: GLTFActorType = GLTFActorType.CLOTH
    name: str = ""
    mesh_path: str = ""
    fixed_nodes: List[int] = field(default_factory=list)
    position: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)


@dataclass
class UniversalPipelineSettings:
    clothes: List[UniversalActorConfig] = field(default_factory=list)
    obstacles: List[UniversalActorConfig] = field(default_factory=list)
    num_frames: int = 100_000


@dataclass
class SolverSettings:
    num_substeps: int = 1
    num_iterations: int = 200
    max_speed: float = 1e6
    gravity: Vector3 = (0.0, -9.8, 0.0)
    damping: float = 0.98


@dataclass
class AnimationSettings:
    num_pre_simulation_frames: int = 0
    record_obstacle: bool = False
    record_cloth: bool = False
    export_format: ExportFormat = ExportFormat.ALEMBIC
    export_directory: str = ""
    target_frame_rate: int = 0


@dataclass
class RepulsionSettings:
    enable_imminent_repulsion: bool = True
    imminent_thickness: float = 1e-3
    relaxation_rate: float = 0.25
    enable_pbd_repulsion: bool = True
    pbd_thickness: float = 1e-4


@dataclass
class ImpactZoneSettings:
    obstacle_mass: float = 1e3
    thickness: float = 1e-4


@dataclass
class QualityModeSettings:
    solver: SolverSettings = field(default_factory=SolverSettings)
    fabric: FEMFabricSettings = field(default_factory=FEMFabricSettings)
    repulsion: RepulsionSettings = field(default_factory=RepulsionSettings)
    impact_zone: ImpactZoneSettings = field(default_factory=ImpactZoneSettings)


@dataclass
class SwiftModeCollisionSettings:
    num_collision_passes: int = 10
    sdf_collision_margin: float = 1e-2
    bvh_tolerance: float = 0.003
    self_contact: ParticleCollisionSettings = field(default_factory=ParticleCollisionSettings)


@dataclass
class SwiftModeSettings:
    solver: SolverSettings = field(default_factory=SolverSettings)
    fabric: BasicFabricSettings = field(default_factory=BasicFabricSettings)
    collision: SwiftModeCollisionSettings = field(default_factory=SwiftModeCollisionSettings)