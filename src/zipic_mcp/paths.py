from __future__ import annotations

"""Prediction of the output paths the application will write."""

from pathlib import PurePath
from typing import List, Optional, Sequence

OUTPUT_SUFFIX = "-compressed"


def _split_name(name: str) -> tuple[str, str]:
    """Split ``name`` into stem and extension at its final dot."""
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, extension


def output_name(target: str) -> str:
    """Return the file name the application gives the compressed ``target``."""
    stem, extension = _split_name(PurePath(target).name)
    name = f"{stem}{OUTPUT_SUFFIX}"
    return f"{name}.{extension}" if extension else name


def predict_output_path(target: str, directory: Optional[str] = None) -> str:
    """Return the expected output path for a single ``target``."""
    parent = PurePath(directory) if directory is not None else PurePath(target).parent
    return str(parent / output_name(target))


def predict_output_paths(
    targets: Sequence[str],
    directory: Optional[str] = None,
    *,
    use_default_directory: bool = False,
) -> List[str]:
    """
    Return one predicted output path per target, in target order.

    Outputs sit beside their sources unless ``directory`` is given. When the
    application is told to use its own default directory the location cannot
    be known in advance and an empty list is returned.

    The name always carries the fixed ``-compressed`` suffix; a custom
    ``suffix`` on the request is not consulted.
    """
    if use_default_directory:
        return []
    return [predict_output_path(target, directory) for target in targets]


__all__ = ["OUTPUT_SUFFIX", "output_name", "predict_output_path", "predict_output_paths"]
