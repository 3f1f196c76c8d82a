"""Price prediction strategies"""

from .base import PredictionStrategy
from .factory import create_strategy
from .momentum import MomentumPredictor
from .seasonal import SeasonalVolumePredictor

__all__ = [
    "PredictionStrategy",
    "MomentumPredictor",
    "SeasonalVolumePredictor",
    "create_strategy",
]
