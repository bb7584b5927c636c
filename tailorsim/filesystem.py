"""Asset directory layout and small filesystem utilities."""

from __future__ import annotations

import logging
import random
import shutil
import string
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

_log = logging.getLogger(__name__)

_PRINTABLE = string.digits + string.ascii_lowercase + string.ascii_uppercase
_SHARED_SMPL_MODELS = ("SMPL", "SMPLH")


def _garment_model_dir(body_model: str) -> str:
    # SMPL and SMPLH share the same garment assets.
    return "SMPLH" if body_model in _SHARED_SMPL_MODELS else body_model


def cloth_template_directory_smpl(asset_directory: PathLike, body_model: str) -> Path:
    return (Path(asset_directory) / "Garment" / _garment_model_dir(body_model) / "Template").absolute()


def cloth_template_directory_gltf(asset_directory: PathLike, character_id: str) -> Path:
    return (Path(asset_directory) / "Garment" / character_id / "Template").absolute()


def cloth_config_directory_smpl(asset_directory: PathLike, body_model: str) -> Path:
    return (Path(asset_directory) / "Garment" / _garment_model_dir(body_model) / "Config").absolute()


def cloth_config_directory_gltf(asset_directory: PathLike, character_id: str) -> Path:
    return (Path(asset_directory) / "Garment" / character_id / "Config").absolute()


def body_template_directory(asset_directory: PathLike) -> Path:
    return (Path(asset_directory) / "Body" / "Template").absolute()


def body_model_directory(asset_directory: PathLike) -> Path:
    return (Path(asset_directory) / "Body" / "Model").absolute()


def helper_directory(asset_directory: PathLike) -> Path:
    return (Path(asset_directory) / "Helper").absolute()


def texture_directory(asset_directory: PathLike) -> Path:
    return (Path(asset_directory) / "Texture").absolute()


def shader_directory(asset_directory: PathLike) -> Path:
    return (Path(asset_directory) / "Shader").absolute()


def file_name_from_path(path: PathLike) -> str:
    """The file name without directory or final extension."""
    return Path(path).stem


def make_random_str(size: int, printable: bool = True) -> str:
    """A random string of ``size`` characters.

    Printable strings use digits and ASCII letters; otherwise each
    character has a code point from 0 to 254.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random(random.SystemRandom().getrandbits(64))
    if printable:
        return "".join(rng.choice(_PRINTABLE) for _ in range(size))
    return "".join(chr(rng.randrange(0xFF)) for _ in range(size))


def formatted_time(moment: Optional[datetime] = None) -> str:
    """Local time as YYYY-MM-DD-HH-MM-SS."""
    return (moment if moment is not None else datetime.now()).strftime("%Y-%m-%d-%H-%M-%S")


def _require_directory(folder: PathLike) -> Path:
    path = Path(folder)
    if not path.is_dir():
        raise NotADirectoryError(f"Provided path is not a directory or does not exist: {path}")
    return path


def delete_folder_contents(folder: PathLike) -> int:
    """Remove everything inside ``folder``; return the number of entries removed."""
    path = _require_directory(folder)
    removed = 0
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        removed += 1
    _log.info("All contents deleted from: %s", path)
    return removed


def delete_files_only(folder: PathLike) -> int:
    """Remove the regular files directly inside ``folder``; return how many."""
    path = _require_directory(folder)
    removed = 0
    for entry in path.iterdir():
        if entry.is_file():
            entry.unlink()
            removed += 1
    _log.info("All files deleted from: %s", path)
    return removed