# tailorsim

Building blocks for a position-based cloth simulator: simulation and
engine settings with their defaults, triangle meshes with vertex
adjacency, geodesic distances over a mesh's edges, Wavefront OBJ export,
and timing, logging and filesystem helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tailorsim.config`: the enums `ExtendMode`, `SolverMode`, `Pipeline`,
  `ExportFormat`, `StretchMode`, `BendingMode`, `UniversalActorType` and
  `GLTFActorType`, and dataclasses for fabric, solver, collision,
  repulsion, impact-zone, animation and pipeline settings
  (`SwiftModeSettings`, `QualityModeSettings`, `UniversalActorConfig`,
  `GLTFActorConfig`, `SkinParam`, `BindingParam`, ...). Also the
  constants `EPSILON` and `SCALAR_MAX`.
- `tailorsim.state`: `SimParams` (per-frame parameters, with
  `current_frame_label()`), `GameState`, `EngineConfig`, `SimConfig`
  (all pipeline and solver settings together) and the frozen
  `DisplayConfig`.
- `tailorsim.errors`: `ExitCode`, an `IntEnum` of exit codes grouped by
  subsystem, and `TailorError`, an exception carrying one of them.
- `tailorsim.callback`: `Callback`, which calls its registered functions
  in registration order (`register`, `invoke`, `clear`, `empty`).
- `tailorsim.timer`: `Timer`, tracking frame deltas (capped at 0.2 s),
  fixed 1/60 s steps, labelled section timers and periodic updates. It
  takes an optional clock function and uses `time.perf_counter` by
  default.
- `tailorsim.seeds`: `SeedGenerator`, drawing integers uniformly from the
  unsigned 32-bit range, optionally from a fixed seed.
- `tailorsim.helper`: `rotate_matrix_with_degree` and
  `rotate_vector_with_degree` (Euler angles in degrees, applied about y,
  then z, then x), `random_scalar`, `random_unit_vector` and `lerp`.
- `tailorsim.logger`: `create_logger`, which writes to stdout and to a
  rotating, timestamped file in a given directory, `switch_log_level` on
  a 0 (trace) to 6 (off) scale, and the date/time helpers `to_date_int`,
  `to_time_int` and `now_date_time_ints`.
- `tailorsim.filesystem`: the asset directory layout
  (`cloth_template_directory_smpl`, `cloth_config_directory_gltf`,
  `shader_directory`, ...), `file_name_from_path`, `make_random_str`,
  `formatted_time`, `delete_folder_contents` and `delete_files_only`.
- `tailorsim.mesh`: `Index`, `MeshData` and `Mesh`, built directly, from
  `MeshData` (`Mesh.from_mesh_data`) or from interleaved attributes
  (`Mesh.from_packed`); it gives `neighbors`, `edges`,
  `compute_normals`, `use_indices` and `draw_count`.
- `tailorsim.geodesic`: `Geodesic`, Dijkstra distances and shortest-path
  maps from source vertices along mesh edges.
- `tailorsim.objio`: OBJ writers (`save_body_as_obj`, `save_mesh_as_obj`,
  `save_garment_as_obj`, `save_mesh_data_as_obj`,
  `save_mesh_data_as_obj_with_uv_normal`), and `map_value`,
  `hsv_to_rgb` and `get_basename`.

## Example

```python
from tailorsim.mesh import Mesh
from tailorsim.geodesic import Geodesic
from tailorsim.objio import save_mesh_as_obj

positions = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
indices = [0, 1, 2, 0, 2, 3]
mesh = Mesh(positions, indices=indices)

geodesic = Geodesic(mesh)
geodesic.sources.append(0)
distances = geodesic.compute_geodesic_distance(0)
print(distances)          # also stored in geodesic.distances[0]
print(mesh.neighbors(0))  # [1, 2, 3]

save_mesh_as_obj("quad.obj", positions, indices)
```

## What it does not do

This package holds the settings, data structures and utilities around a
cloth simulator, not the simulator itself. It has no solver, no
collision handling, no body or animation loading, no rendering or
window, and no command-line program. It writes OBJ files but does not
read them: `MeshData` is filled in by the caller.