"""
Chess Evaluation Parameters

Parameter store and derived lookup tables for a classical chess evaluator.

## Architecture

The package is organized into several key modules:

1. **params**: Evaluation slots and the parameter store
   - Named slots with bounds and tunability flags
   - Out-of-range values are rejected

2. **profiles**: Initial parameter sets
   - "default": automatically tuned, with tuning ranges
   - "personality": hand-tuned base for engine personalities

3. **tables**: Derived tables built from the store
   - Piece-square tables (side-relative, mirrored for Black)
   - Mobility curves (formula or tuned)
   - Pawn-count adjustments and material imbalance
   - Backward and passed pawn tables
   - King-danger curve
   - Square distance tables

4. **strength**: Rating-driven weakening
   - Node-rate cap, evaluation blur, book depth

## Quick Start

```python
import chess
from chess_params import EngineParams, Param

params = EngineParams.from_profile("default")
params.tables.mg_pst[chess.WHITE][chess.KNIGHT, chess.E4]

params.tune(Param.W_PST, 80)   # bounded update, tables rebuilt
params.print_tunable_values()
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_params.config import EngineSettings
from chess_params.engine_params import EngineParams
from chess_params.params import Param, ParameterBoundsError, ParameterStore
from chess_params.tables import EvalTables, TemplateMismatchError, build_tables, distance_tables

__all__ = [
    'EngineParams',
    'EngineSettings',
    'EvalTables',
    'Param',
    'ParameterBoundsError',
    'ParameterStore',
    'TemplateMismatchError',
    'build_tables',
    'distance_tables',
]
