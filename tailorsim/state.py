"""Run-time parameters, interaction state and engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tailorsim.config import (
    AnimationSettings,
    GLTFPipelineSettings,
    QualityModeSettings,
    SMPLPipelineSettings,
    SwiftModeSettings,
    UniversalPipelineSettings,
    Vector3,
)

MAX_EXPORTED_ACTORS = 5
MAX_VISIBLE_ACTORS = 99


@dataclass
class SimParams:
    """Parameters that may change on every frame."""

    num_substeps: int = 1
    num_iterations: int = 100
    max_num_neighbors: int = 64
    max_speed: float = 999.0
    num_lerped_frames: int = 0
    gravity: Vector3 = (0.0, -9.8, 0.0)
    damping: float = 0.98
    relaxation_factor: float = 0.25
    long_range_stretchiness: float = 1.0

    collision_margin: float = 0.01
    sdf_friction: float = 0.1
    enable_self_collision: bool = True

    num_particles: int = 0
    num_edges: int = 0
    num_faces: int = 0
    num_attached_slots: int = 0
    num_skinned_slots: int = 0
    particle_diameter: float = 0.0

    delta_time: float = 0.0

    num_clothes: int = 0
    num_obstacles: int = 0
    num_obstacle_vertices: int = 0
    num_obstacle_edges: int = 0
    num_obstacle_faces: int = 0
    num_overall_particles: int = 0

    player_speed: float = 0.5

    pre_simulation_frame_index: int = 0
    pre_simulation_frames: int = 120
    frame_index: int = 0
    num_frames: int = 0

    record_obstacle: bool = False
    record_cloth: bool = False
    update_obstacle_animation: bool = True
    imminent_repulsion: bool = True
    pbd_repulsion: bool = True

    geodesic_LRA: bool = True
    solve_bending: bool = True

    bvh_tolerance: float = 0.001

    draw_obstacle_normals: bool = True
    draw_cloth_normals: bool = True
    draw_obstacle_aabbs: bool = True
    draw_internal_nodes: bool = True
    draw_external_nodes: bool = True

    solver_mode: int = 0
    pipeline: int = 0

    num_collision_passes: int = 10

    icm_enable: bool = False
    icm_h0: float = 1e-4
    icm_g0: float = 10.5
    icm_iters: int = 10

    cloth_exported: List[bool] = field(default_factory=lambda: [False] * MAX_EXPORTED_ACTORS)
    obstacle_exported: List[bool] = field(
        default_factory=lambda: [False] * MAX_EXPORTED_ACTORS
    )

    scr: float = 0.002
    radius: float = 0.002

    frame_rate: int = 60

    def current_frame_label(self) -> str:
        """Describe the frame shown last, as the animation panel does."""
        shown = self.frame_index - 1 if self.frame_index > 0 else 0
        return f"Frame {shown} ({self.num_frames} total)"


@dataclass
class GameState:
    """Interactive switches of the running session."""

    step: bool = False
    pause: bool = False
    render_wireframe: bool = False
    render_obstacle: bool = True
    draw_particles: bool = False
    hide_gui: bool = False
    detail_timer: bool = False
    actor_visibilities: List[bool] = field(
        default_factory=lambda: [True] * MAX_VISIBLE_ACTORS
    )


@dataclass
class EngineConfig:
    """Settings that stay fixed once the engine has started."""

    log_path: str = "./log/"
    log_level: int = 0
    headless_simulation: bool = False
    asset_directory: str = "./Assets/"
    max_frame_rate: int = 240


@dataclass
class SimConfig:
    """All pipeline and solver settings of one simulation."""

    smpl: SMPLPipelineSettings = field(default_factory=SMPLPipelineSettings)
    gltf: GLTFPipelineSettings = field(default_factory=GLTFPipelineSettings)
    universal: UniversalPipelineSettings = field(default_factory=UniversalPipelineSettings)
    animation: AnimationSettings = field(default_factory=AnimationSettings)
    quality: QualityModeSettings = field(default_factory=QualityModeSettings)
    swift: SwiftModeSettings = field(default_factory=SwiftModeSettings)


@dataclass(frozen=True)
class DisplayConfig:
    """Fixed camera and screen dimensions."""

    camera_translate_speed: float = 2.5
    camera_rotate_sensitivity: float = 0.15
    screen_width: int = 1920
    screen_height: int = 1080
    shadow_width: int = 1024
    shadow_height: int = 1024