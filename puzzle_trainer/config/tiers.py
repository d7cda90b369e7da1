"""Compiled-in difficulty tiers and level tables for each puzzle family.

Tiers, time limits and penalty rates are constants, not runtime configuration.
"""

from puzzle_trainer.models import Difficulty, DifficultyTier, LevelSpec, PuzzleFamily

# Shape symbols for the grid family, in display order
SHAPES: tuple[str, ...] = ("square", "triangle", "circle", "pentagon", "diamond", "hexagon")

# Labels for the four input positions of the code family
SWITCH_SHAPES: dict[int, str] = {1: "square", 2: "triangle", 3: "asterisk", 4: "circle"}

CODE_LENGTH = 4

GRID_TIERS: dict[Difficulty, DifficultyTier] = {
    Difficulty.EASY: DifficultyTier(
        difficulty=Difficulty.EASY,
        family=PuzzleFamily.GRID,
        level_count=5,
        score_multiplier=1,
        time_penalty_seconds=15,
        score_penalty_fraction=0.2,
        hidden_fraction=0.25,
        grid_sizes=(4,),
    ),
    Difficulty.MEDIUM: DifficultyTier(
        difficulty=Difficulty.MEDIUM,
        family=PuzzleFamily.GRID,
        level_count=8,
        score_multiplier=1.5,
        time_penalty_seconds=20,
        score_penalty_fraction=0.25,
        hidden_fraction=0.35,
        grid_sizes=(4, 5),
    ),
    Difficulty.HARD: DifficultyTier(
        difficulty=Difficulty.HARD,
        family=PuzzleFamily.GRID,
        level_count=10,
        score_multiplier=2,
        time_penalty_seconds=25,
        score_penalty_fraction=0.3,
        hidden_fraction=0.45,
        grid_sizes=(5, 6),
    ),
    Difficulty.EXPERT: DifficultyTier(
        difficulty=Difficulty.EXPERT,
        family=PuzzleFamily.GRID,
        level_count=12,
        score_multiplier=3,
        time_penalty_seconds=30,
        score_penalty_fraction=0.35,
        hidden_fraction=0.55,
        grid_sizes=(6,),
    ),
}

GRID_TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 120,
    Difficulty.MEDIUM: 180,
    Difficulty.HARD: 240,
    Difficulty.EXPERT: 300,
}

# Grid size steps up every this many levels, capped at the tier's largest size
GRID_LEVELS_PER_SIZE = 3

CODE_TIERS: dict[Difficulty, DifficultyTier] = {
    Difficulty.EASY: DifficultyTier(
        difficulty=Difficulty.EASY,
        family=PuzzleFamily.CODE,
        level_count=5,
        score_multiplier=1,
        time_penalty_seconds=5,
        score_penalty_fraction=0.1,
    ),
    Difficulty.MEDIUM: DifficultyTier(
        difficulty=Difficulty.MEDIUM,
        family=PuzzleFamily.CODE,
        level_count=8,
        score_multiplier=1.5,
        time_penalty_seconds=8,
        score_penalty_fraction=0.15,
    ),
    Difficulty.HARD: DifficultyTier(
        difficulty=Difficulty.HARD,
        family=PuzzleFamily.CODE,
        level_count=10,
        score_multiplier=2,
        time_penalty_seconds=10,
        score_penalty_fraction=0.2,
    ),
    Difficulty.EXPERT: DifficultyTier(
        difficulty=Difficulty.EXPERT,
        family=PuzzleFamily.CODE,
        level_count=12,
        score_multiplier=3,
        time_penalty_seconds=15,
        score_penalty_fraction=0.25,
    ),
}

# Candidate code sets; each set holds four distinct permutations of "1234"
_CODES_A = ("1234", "2143", "3412", "4321")
_CODES_B = ("1324", "2413", "3142", "4231")
_CODES_C = ("1423", "2314", "3241", "4132")
_CODES_D = ("1342", "2431", "3124", "4213")
_CODES_E = ("1243", "2134", "3421", "4312")
_CODES_F = ("1432", "2341", "3214", "4123")

CODE_CATALOGUE: tuple[str, ...] = _CODES_A + _CODES_B + _CODES_C + _CODES_D + _CODES_E + _CODES_F


def _code_levels(*rows: tuple[tuple[str, ...], int]) -> tuple[LevelSpec, ...]:
    return tuple(
        LevelSpec(level=i, size=CODE_LENGTH, time_limit_seconds=limit, codes=codes)
        for i, (codes, limit) in enumerate(rows, 1)
    )


CODE_LEVELS: dict[Difficulty, tuple[LevelSpec, ...]] = {
    Difficulty.EASY: _code_levels(
        (_CODES_A, 120), (_CODES_B, 110), (_CODES_C, 100), (_CODES_D, 90), (_CODES_E, 80)
    ),
    Difficulty.MEDIUM: _code_levels(
        (_CODES_A, 100),
        (_CODES_B, 90),
        (_CODES_C, 80),
        (_CODES_D, 70),
        (_CODES_E, 60),
        (_CODES_F, 50),
        (_CODES_D, 45),
        (_CODES_C, 40),
    ),
    Difficulty.HARD: _code_levels(
        (_CODES_A, 90),
        (_CODES_B, 80),
        (_CODES_C, 70),
        (_CODES_D, 60),
        (_CODES_E, 50),
        (_CODES_F, 45),
        (_CODES_D, 40),
        (_CODES_C, 35),
        (_CODES_B, 30),
        (_CODES_E, 25),
    ),
    Difficulty.EXPERT: _code_levels(
        (_CODES_A, 60),
        (_CODES_B, 55),
        (_CODES_C, 50),
        (_CODES_D, 45),
        (_CODES_E, 40),
        (_CODES_F, 35),
        (_CODES_D, 30),
        (_CODES_C, 25),
        (_CODES_B, 20),
        (_CODES_E, 18),
        (_CODES_F, 15),
        (_CODES_B, 12),
    ),
}

_TIERS: dict[PuzzleFamily, dict[Difficulty, DifficultyTier]] = {
    PuzzleFamily.GRID: GRID_TIERS,
    PuzzleFamily.CODE: CODE_TIERS,
}


def get_tier(family: PuzzleFamily, difficulty: "Difficulty | str") -> DifficultyTier:
    """Look up the compiled-in tier for a puzzle family.

    Args:
        family: Puzzle family
        difficulty: Difficulty enum member or its name

    Returns:
        The matching DifficultyTier

    Raises:
        ValueError: If the difficulty name is unknown
    """
    return _TIERS[family][Difficulty.parse(difficulty)]


def grid_size_for_level(tier: DifficultyTier, level: int) -> int:
    """Pick the grid dimension for a level: one step every few levels, clamped."""
    if not tier.grid_sizes:
        raise ValueError(f"Tier '{tier.name}' defines no grid sizes")
    index = min((level - 1) // GRID_LEVELS_PER_SIZE, len(tier.grid_sizes) - 1)
    return tier.grid_sizes[index]


def level_spec(tier: DifficultyTier, level: int) -> LevelSpec:
    """Select the LevelSpec for a tier and 1-indexed level.

    Levels beyond the defined table clamp to the last defined level.

    Raises:
        ValueError: If level is less than 1
    """
    if level < 1:
        raise ValueError(f"Level must be 1 or greater, got {level}")

    if tier.family is PuzzleFamily.GRID:
        time_limit = GRID_TIME_LIMITS.get(tier.difficulty, GRID_TIME_LIMITS[Difficulty.EASY])
        return LevelSpec(
            level=level,
            size=grid_size_for_level(tier, level),
            time_limit_seconds=time_limit,
        )

    table = CODE_LEVELS[tier.difficulty]
    return table[min(level, len(table)) - 1]


def describe_tier(tier: DifficultyTier) -> list[str]:
    """Feature bullets for the configuration stage."""
    bullets = [f"{tier.level_count} levels to complete"]
    if tier.family is PuzzleFamily.GRID:
        sizes = " and ".join(f"{n}x{n}" for n in tier.grid_sizes)
        bullets.append(f"{sizes} grids")
        bullets.append(f"{GRID_TIME_LIMITS[tier.difficulty]} seconds per level")
    else:
        table = CODE_LEVELS[tier.difficulty]
        bullets.append(
            f"{table[0].time_limit_seconds}s down to {table[-1].time_limit_seconds}s per level"
        )
    if tier.score_multiplier == 1:
        bullets.append("Standard scoring")
    else:
        bullets.append(f"{tier.score_multiplier:g}x score multiplier")
    bullets.append(
        f"-{tier.time_penalty_seconds}s and -{tier.score_penalty_fraction:.0%} per wrong answer"
    )
    return bullets
