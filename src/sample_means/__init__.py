"""
Counted-loop unit conversion and Monte Carlo sample-mean sampling.
"""

from .heights import HEIGHTS_CM, height_records
from .mean_sampler import MeanSampler, sample_mean
from .unit_conversion import (
    CM_PER_INCH,
    Record,
    cm_to_inches,
    convert,
    convert_records,
    inches_to_cm,
)

__all__ = [
    "CM_PER_INCH",
    "HEIGHTS_CM",
    "MeanSampler",
    "Record",
    "cm_to_inches",
    "convert",
    "convert_records",
    "height_records",
    "inches_to_cm",
    "sample_mean",
]
