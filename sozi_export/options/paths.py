"""
sozi_export/options/paths.py -- Default output locations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from sozi_export.options.models import ExportOptions


def resolve_output_path(
    input_path: Union[str, Path],
    options: ExportOptions,
    ext: str,
) -> Path:
    """
    Fill in ``options.output`` from the input file name if it is unset.

    Raw frame exports land next to the input; everything else gets the
    input path with its last extension replaced by ``ext``. An explicit
    output is returned untouched.
    """
    if options.output is None:
        source = Path(input_path)
        if getattr(options, "images", False):
            options.output = source.parent
        else:
            options.output = source.with_suffix("." + ext.lstrip("."))
    return options.output
