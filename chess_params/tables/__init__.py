"""
Derived Tables Module

Builders that turn parameter values and static templates into the
read-only lookup tables the evaluator consults during search.

Key Components:
    - build_tables / EvalTables: Every parameter-dependent table at once
    - distance_tables: Square-pair tropism and Chebyshev tables
    - templates: Piece-square templates and the imbalance template

Data Flow:
    ParameterStore → build_tables() → EvalTables (frozen numpy arrays)
"""

from chess_params.tables.builder import EvalTables, build_tables
from chess_params.tables.distance import DistanceTables, distance_tables
from chess_params.tables.material import TemplateMismatchError, imbalance_index
from chess_params.tables.templates import SpecialSquare

__all__ = [
    'EvalTables',
    'build_tables',
    'DistanceTables',
    'distance_tables',
    'TemplateMismatchError',
    'imbalance_index',
    'SpecialSquare',
]
