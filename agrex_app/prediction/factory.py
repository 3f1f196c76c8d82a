"""Strategy construction from configuration."""

import random
from typing import Optional

from ..config.defaults import StrategyParams
from ..errors import InvalidArgumentError
from ..utils.time import Today
from .base import PredictionStrategy
from .momentum import MomentumPredictor
from .seasonal import SeasonalVolumePredictor


def create_strategy(
    params: Optional[StrategyParams] = None,
    rng: Optional[random.Random] = None,
    today: Optional[Today] = None,
) -> PredictionStrategy:
    """
    Build the strategy named by params.kind.

    A seed of -1 leaves the generator seeded from system entropy unless an
    explicit rng is passed.
    """
    params = params or StrategyParams()

    if rng is None:
        rng = random.Random(None if params.seed < 0 else params.seed)

    if params.kind == "momentum":
        return MomentumPredictor(
            rng=rng,
            today=today,
            load_delay_seconds=params.momentum_load_delay_seconds,
            horizon_days=params.horizon_days,
        )
    if params.kind == "seasonal":
        return SeasonalVolumePredictor(
            rng=rng,
            today=today,
            load_delay_seconds=params.seasonal_load_delay_seconds,
            horizon_days=params.horizon_days,
        )

    raise InvalidArgumentError(f"Unknown strategy kind: {params.kind}", argument="kind", value=params.kind)
