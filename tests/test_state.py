import dataclasses

import pytest

from tailorsim.config import QualityModeSettings, SwiftModeSettings
from tailorsim.state import DisplayConfig, EngineConfig, GameState, SimConfig, SimParams


def test_sim_params_defaults_from_source():
    params = SimParams()
    assert params.num_iterations == 100
    assert params.pre_simulation_frames == 120
    assert params.gravity == (0.0, -9.8, 0.0)


def test_exported_flags_are_per_instance():
    a = SimParams()
    b = SimParams()
    assert a.cloth_exported == [False] * len(a.cloth_exported)
    a.cloth_exported[0] = True
    assert b.cloth_exported[0] is False
    assert len(a.obstacle_exported) == len(a.cloth_exported)


@pytest.mark.parametrize("frames", [0, 10, 250])
def test_label_at_start_shows_first_frame(frames):
    params = SimParams(frame_index=0, num_frames=frames)
    assert params.current_frame_label() == f"Frame 0 ({frames} total)"


def test_label_after_frames_shows_previous_index():
    params = SimParams(frame_index=7, num_frames=20)
    assert params.current_frame_label() == "Frame 6 (20 total)"
    params.frame_index = 1
    assert params.current_frame_label().startswith("Frame 0 ")


def test_game_state_defaults():
    state = GameState()
    assert state.pause is False
    assert state.render_obstacle is True
    assert len(state.actor_visibilities) == 99


def test_engine_config_defaults():
    cfg = EngineConfig()
    assert cfg.log_path == "./log/"
    assert cfg.asset_directory == "./Assets/"
    assert cfg.max_frame_rate == 240


def test_sim_config_holds_mode_settings():
    cfg = SimConfig()
    assert isinstance(cfg.quality, QualityModeSettings)
    assert isinstance(cfg.swift, SwiftModeSettings)
    cfg.smpl.body_model = "SMPLX"
    assert SimConfig().smpl.body_model == ""


def test_display_config_is_frozen():
    display = DisplayConfig()
    assert (display.screen_width, display.screen_height) == (1920, 1080)
    with pytest.raises(dataclasses.FrozenInstanceError):
        display.screen_width = 10