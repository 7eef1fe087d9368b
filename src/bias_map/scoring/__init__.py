"""Pure scoring helpers: averaging and quadrant classification."""

from bias_map.scoring.aggregator import mean
from bias_map.scoring.classifier import BiasPrediction, Quadrant, bias_for, quadrant

__all__ = ["BiasPrediction", "Quadrant", "bias_for", "mean", "quadrant"]
