"""
Engine settings that travel with an evaluation profile.
"""

from dataclasses import dataclass

FULL_BOOK_DEPTH = 256


@dataclass
class EngineSettings:
    """Strength, book and timing settings set by a profile.

    Both profiles start from these defaults: full strength, book enabled,
    no evaluation noise.
    """

    # Strength
    search_skill: int = 10
    """Search skill level (0-10)"""

    nps_limit: int = 0
    """Node-rate cap, 0 = unlimited"""

    weakening: bool = False
    """Scale strength down from ``elo``"""

    elo: int = 2800
    """Target rating used when weakening is on"""

    eval_blur: int = 0
    """Evaluation noise amplitude in centipawns"""

    book_depth: int = FULL_BOOK_DEPTH
    """Deepest ply at which the opening book is consulted"""

    # Opening book
    use_book: bool = True
    verbose_book: bool = True
    book_filter: int = 20
    """Minimum move frequency percentage for book moves"""

    # Timing
    time_percentage: int = 100
    """Percentage of allotted time actually used"""

    # Varia
    draw_score: int = 0
    """Score of a drawn position, from the engine's point of view"""

    quiet: bool = False
    """Suppress currmove and similar info output"""

    # History limits for pruning and reductions
    hist_perc: int = 175
    hist_limit: int = 24576

    def __post_init__(self):
        """Validate settings after initialization."""
        if not 0 <= self.search_skill <= 10:
            raise ValueError(f"search_skill should be in [0, 10], got {self.search_skill}")

        if self.nps_limit < 0:
            raise ValueError(f"nps_limit must be non-negative, got {self.nps_limit}")

        if self.eval_blur < 0:
            raise ValueError(f"eval_blur must be non-negative, got {self.eval_blur}")

        if self.time_percentage <= 0:
            raise ValueError(f"time_percentage must be positive, got {self.time_percentage}")

        if not 0 <= self.book_filter <= 100:
            raise ValueError(f"book_filter should be in [0, 100], got {self.book_filter}")
