"""최적화 진입점 - 전략 선택, 실행, 사용률 계산, 결과 조립

optimize(config, specs)는 (config, specs)만의 순수 함수다. 전략 실패는 예외 없이
다음 전략으로 폴백하고, 원판에 안 들어가는 조각은 unplaced로 보고한다.
"""

from __future__ import annotations
import logging
from collections import Counter
from dataclasses import replace

from .cuts import compute_cuts
from .models import (
    EPSILON, HeuristicTrace, OptimizationConfig, OptimizationResult, PieceSpec, UnplacedPiece,
)
from .packing import Packing, PackingStrategy
from .strategies import FullWidthPacker, MultiColumnPacker, TwoColumnSplitPacker

logger = logging.getLogger(__name__)

REASON_INVALID_CONFIG = "invalid configuration"
REASON_TOO_LARGE = "does not fit the board in any allowed orientation"
REASON_NOT_PLACED = "not placed by the selected strategy"


def fits_board(config: OptimizationConfig, spec: PieceSpec) -> bool:
    """원래 방향 또는 (허용 시) 회전 방향으로 원판에 들어가는지"""
    w, h = config.board_width + EPSILON, config.board_height + EPSILON
    if spec.width <= w and spec.height <= h:
        return True
    return config.allow_rotation and spec.height <= w and spec.width <= h


def _unplaced(spec: PieceSpec, count: int, reason: str) -> list[UnplacedPiece]:
    return [UnplacedPiece(spec.id, spec.width, spec.height, reason) for _ in range(count)]


def _empty_result(config: OptimizationConfig, unplaced: list[UnplacedPiece] | None = None) -> OptimizationResult:
    return OptimizationResult(
        boards=[],
        pieces=[],
        cuts=[],
        utilization=0.0,
        board_width=config.board_width,
        board_height=config.board_height,
        unplaced=unplaced or [],
    )


def _attempt(strategy: PackingStrategy, specs: list[PieceSpec]) -> Packing | None:
    packing = strategy.pack(specs)
    if packing is not None and not packing.pieces:
        packing = None
    if packing is None:
        logger.debug("strategy '%s' failed, falling back", strategy.name)
    return packing


def _trace(strategy: PackingStrategy, packing: Packing | None) -> HeuristicTrace:
    if packing is None:
        return HeuristicTrace(strategy.name, strategy.label, 0.0, 0, 0, succeeded=False)
    return HeuristicTrace(
        strategy.name,
        strategy.label,
        strategy.utilization(packing),
        len(packing.boards),
        strategy.count_cuts(packing.boards),
    )


def select_strategies(config: OptimizationConfig) -> list[PackingStrategy]:
    """설정에 따른 전략 시도 순서 (마지막은 항상 전체 폭 폴백)"""
    chain: list[PackingStrategy] = []
    if config.use_advanced_optimizer:
        chain.append(MultiColumnPacker.from_config(config))
    if config.force_two_columns:
        chain.append(TwoColumnSplitPacker.from_config(config))
    chain.append(FullWidthPacker.from_config(config))
    return chain


def optimize(config: OptimizationConfig, specs: list[PieceSpec]) -> OptimizationResult:
    """조각 사양을 원판에 배치하고 절단 목록/사용률을 계산

    Args:
        config: 원판 크기, kerf, 회전 허용, 전략 플래그
        specs: 조각 사양 목록

    Returns:
        OptimizationResult (원판, 배치 조각, 절단선, 사용률, 미배치 조각)
    """
    valid_specs = [spec for spec in specs if spec.is_valid]

    if not config.is_valid:
        logger.warning(
            "invalid configuration (board %sx%s, kerf %s), returning empty result",
            config.board_width, config.board_height, config.kerf,
        )
        unplaced = [u for spec in valid_specs for u in _unplaced(spec, spec.quantity, REASON_INVALID_CONFIG)]
        return _empty_result(config, unplaced)

    if not valid_specs:
        return _empty_result(config)

    feasible: list[PieceSpec] = []
    unplaced: list[UnplacedPiece] = []
    for spec in valid_specs:
        if fits_board(config, spec):
            feasible.append(spec)
        else:
            logger.info("piece '%s' (%sx%s) is larger than the board", spec.id, spec.width, spec.height)
            unplaced.extend(_unplaced(spec, spec.quantity, REASON_TOO_LARGE))

    if not feasible:
        return _empty_result(config, unplaced)

    packing = None
    selected = None
    heuristics: list[HeuristicTrace] = []
    for strategy in select_strategies(config):
        packing = _attempt(strategy, feasible)
        heuristics.append(_trace(strategy, packing))
        if packing is not None:
            selected = strategy
            break

    if packing is None:
        # 전체 폭 폴백은 원판에 들어가는 조각이면 항상 배치한다
        unplaced.extend(u for spec in feasible for u in _unplaced(spec, spec.quantity, REASON_NOT_PLACED))
        return _empty_result(config, unplaced)

    heuristics = [replace(h, selected=(h.id == selected.name)) for h in heuristics]

    # 보존 법칙: 요청 수량 - 배치 수량만큼 미배치로 보고
    placed_counts = Counter(piece.spec_id for piece in packing.pieces)
    for spec in feasible:
        placed = min(spec.quantity, placed_counts[spec.id])
        placed_counts[spec.id] -= placed
        missing = spec.quantity - placed
        if missing > 0:
            unplaced.extend(_unplaced(spec, missing, REASON_NOT_PLACED))

    for board in packing.boards:
        board.utilization = sum(p.area for p in board.pieces) / board.area

    cuts = compute_cuts(packing.boards, config.kerf)
    board_area = config.board_width * config.board_height
    utilization = packing.placed_area / (len(packing.boards) * board_area) if packing.boards else 0.0

    logger.info(
        "strategy '%s': %d pieces on %d boards, %d cuts, utilization %.1f%%",
        selected.name, len(packing.pieces), len(packing.boards), len(cuts), utilization * 100,
    )

    return OptimizationResult(
        boards=packing.boards,
        pieces=packing.pieces,
        cuts=cuts,
        utilization=utilization,
        board_width=config.board_width,
        board_height=config.board_height,
        unplaced=unplaced,
        strategy=selected.name,
        heuristics=heuristics,
    )
