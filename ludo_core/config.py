import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    RING_SIZE: int = 52  # shared ring cells, progress 0..51
    HOME_LANE_SIZE: int = 6  # lane coordinates per color
    TOKENS_PER_PLAYER: int = 4
    MAX_PLAYERS: int = 4
    BASE_PROGRESS: int = -1  # tokens waiting in base
    FINISH_PROGRESS: int = 56  # 52..55 home lane, 56 finished
    EXIT_ROLL: int = 6
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    MAX_CONSECUTIVE_SIXES: int = 3

    # Absolute ring indices (Red, Green, Yellow, Blue)
    ENTRY_OFFSETS: list[int] = field(default_factory=lambda: [0, 13, 26, 39])
    SAFE_CELLS: list[int] = field(
        default_factory=lambda: [0, 8, 13, 21, 26, 34, 39, 47]
    )
    PLAYER_NAMES: list[str] = field(
        default_factory=lambda: ["Red", "Green", "Yellow", "Blue"]
    )
    ACTIVE_SLOTS: dict[int, tuple[int, ...]] = field(
        default_factory=lambda: {2: (0, 2), 3: (0, 1, 2), 4: (0, 1, 2, 3)}
    )

    # Derived (populated in __post_init__ due to slots)
    HOME_LANE_START: int = 0
    LAST_RING_PROGRESS: int = 0

    def __post_init__(self):
        self.HOME_LANE_START = self.RING_SIZE
        self.LAST_RING_PROGRESS = self.RING_SIZE - 1

        if not set(self.ENTRY_OFFSETS) <= set(self.SAFE_CELLS):
            raise ValueError("Every entry offset must be a safe cell")


@dataclass(slots=True)
class AIConfig:
    finish_bonus: float = float(os.getenv("AI_FINISH_BONUS", 1000))
    capture_bonus: float = float(os.getenv("AI_CAPTURE_BONUS", 800))
    deep_capture_bonus: float = float(os.getenv("AI_DEEP_CAPTURE_BONUS", 200))
    deep_capture_progress: int = 30
    exit_no_tokens_bonus: float = 700
    exit_one_token_bonus: float = 400
    exit_default_bonus: float = 200
    exit_max_finished: int = 3
    safe_landing_bonus: float = float(os.getenv("AI_SAFE_LANDING_BONUS", 300))
    home_lane_bonus: float = float(os.getenv("AI_HOME_LANE_BONUS", 350))
    progress_weight: float = float(os.getenv("AI_PROGRESS_WEIGHT", 3))
    escape_bonus: float = float(os.getenv("AI_ESCAPE_BONUS", 150))
    leave_safe_penalty: float = 100
    leave_safe_max_progress: int = 46
    threat_unit: float = 20

    # Randomised tie-break between the two best candidates
    tie_margin: float = float(os.getenv("AI_TIE_MARGIN", 50))
    tie_probability: float = float(os.getenv("AI_TIE_PROBABILITY", 0.3))


@dataclass(slots=True)
class SessionConfig:
    num_players: int = int(os.getenv("NUM_PLAYERS", 4))
    computer_strategy: str = os.getenv("COMPUTER_STRATEGY", "heuristic")
    max_steps: int = int(os.getenv("MAX_STEPS", 10_000))

    def __post_init__(self):
        if self.num_players not in (2, 3, 4):
            raise ValueError("NUM_PLAYERS must be 2, 3 or 4")


config = Config()
ai_config = AIConfig()
session_config = SessionConfig()
