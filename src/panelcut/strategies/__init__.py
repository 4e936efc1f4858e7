"""패킹 전략 모듈"""
from .shelf_column import ShelfColumnPacker, ColumnPacking
from .two_column import TwoColumnSplitPacker, SplitEvaluation
from .full_width import FullWidthPacker
from .multi_column import MultiColumnPacker

__all__ = [
    'ShelfColumnPacker',
    'ColumnPacking',
    'TwoColumnSplitPacker',
    'SplitEvaluation',
    'FullWidthPacker',
    'MultiColumnPacker',
]
