"""
Utilities Module

Key Components:
    - trunc_div / scale: Integer arithmetic truncating toward zero
    - freeze: Mark derived tables read-only
    - setup_logger: Logging configuration for tools
"""

from chess_params.utils.log import setup_logger
from chess_params.utils.numeric import freeze, freeze_mapping, scale, trunc_div

__all__ = [
    'freeze',
    'freeze_mapping',
    'scale',
    'setup_logger',
    'trunc_div',
]
