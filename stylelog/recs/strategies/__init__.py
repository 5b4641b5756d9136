from stylelog.recs.strategies.base import Strategy
from stylelog.recs.strategies.confidence import HighConfidenceStrategy
from stylelog.recs.strategies.weather import WeatherStrategy
from stylelog.recs.strategies.occasion import OccasionStrategy
from stylelog.recs.strategies.comfort import ComfortStrategy
from stylelog.recs.strategies.exploration import ExplorationStrategy

__all__ = [
    "Strategy",
    "HighConfidenceStrategy",
    "WeatherStrategy",
    "OccasionStrategy",
    "ComfortStrategy",
    "ExplorationStrategy",
]
