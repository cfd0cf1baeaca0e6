"""Process-wide default puzzle options."""

from __future__ import annotations

import copy

from .model import PuzzleOptions

_DEFAULT_OPTIONS = PuzzleOptions()


def get_default_options() -> PuzzleOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: PuzzleOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)
