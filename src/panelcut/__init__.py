"""Panelcut - 판재 재단 최적화

2단계 Guillotine Cut 기반 재단 최적화 엔진
"""

from .models import (
    BoardLayout, Cut, HeuristicTrace, Objective, OptimizationConfig, OptimizationResult,
    PieceSpec, PlacedPiece, Shelf, UnplacedPiece,
)
from .optimizer import optimize
from .cuts import compute_cuts
from .verification import verify_result

__all__ = [
    'optimize',
    'compute_cuts',
    'verify_result',
    'BoardLayout',
    'Cut',
    'HeuristicTrace',
    'Objective',
    'OptimizationConfig',
    'OptimizationResult',
    'PieceSpec',
    'PlacedPiece',
    'Shelf',
    'UnplacedPiece',
]
