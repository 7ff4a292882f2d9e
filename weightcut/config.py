from __future__ import annotations

import os
from pathlib import Path


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name) or default)


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name) or default)


class Settings:
    """Centralized policy configuration for the protocol engine."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent

        # ---- Safety assessor ----
        self.danger_delta_24h_lbs: float = _env_float("WEIGHTCUT_DANGER_DELTA_24H_LBS", 3.0)
        self.warning_delta_48h_lbs: float = _env_float("WEIGHTCUT_WARNING_DELTA_48H_LBS", 5.0)
        self.critical_days_threshold: int = _env_int("WEIGHTCUT_CRITICAL_DAYS_THRESHOLD", 2)
        self.max_safe_total_cut_percent: float = _env_float(
            "WEIGHTCUT_MAX_SAFE_TOTAL_CUT_PERCENT", 8.0
        )

        # ---- Calorie adjuster (competition variant) ----
        self.walk_around_multiplier: float = _env_float("WEIGHTCUT_WALK_AROUND_MULTIPLIER", 1.07)
        self.cal_per_lb_over: float = _env_float("WEIGHTCUT_CAL_PER_LB_OVER", 150.0)
        self.min_deficit: int = _env_int("WEIGHTCUT_MIN_DEFICIT", -250)
        self.max_deficit: int = _env_int("WEIGHTCUT_MAX_DEFICIT", -750)
        self.water_cut_deficit: int = _env_int("WEIGHTCUT_WATER_CUT_DEFICIT", -500)
        self.competition_surplus: int = _env_int("WEIGHTCUT_COMPETITION_SURPLUS", 250)
        self.recovery_surplus: int = _env_int("WEIGHTCUT_RECOVERY_SURPLUS", 500)
        self.aggressive_deficit_threshold: int = _env_int(
            "WEIGHTCUT_AGGRESSIVE_DEFICIT_THRESHOLD", -500
        )

        # ---- Protocol recommendation ----
        self.extreme_cut_trigger_percent: float = _env_float(
            "WEIGHTCUT_EXTREME_CUT_TRIGGER_PERCENT", 12.0
        )
        self.projection_switch_buffer_lbs: float = _env_float(
            "WEIGHTCUT_PROJECTION_SWITCH_BUFFER_LBS", 1.0
        )

        # ---- Cut curves ----
        # Daily descent rate of the default target curve (1% of class per day out).
        self.percent_per_day_rate: float = _env_float("WEIGHTCUT_PERCENT_PER_DAY_RATE", 0.01)

        # ---- SPAR slice calculator ----
        self.min_daily_calories: float = _env_float("WEIGHTCUT_MIN_DAILY_CALORIES", 1200.0)

        # ---- Trend / recalculation ----
        self.recalc_threshold_lbs: float = _env_float("WEIGHTCUT_RECALC_THRESHOLD_LBS", 2.0)
        self.big_drop_lbs: float = _env_float("WEIGHTCUT_BIG_DROP_LBS", 1.5)

        # ---- Snapshot storage ----
        self.data_root: Path = Path(
            os.environ.get("WEIGHTCUT_DATA_ROOT") or (repo_root / "data")
        ).expanduser()
        self.snapshot_path: Path = Path(
            os.environ.get("WEIGHTCUT_SNAPSHOT_PATH") or (self.data_root / "snapshot.json")
        ).expanduser()


settings = Settings()
