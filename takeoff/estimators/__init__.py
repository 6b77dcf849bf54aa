"""Takeoff trade estimators.

This package contains one estimator per trade, all sharing
TradeEstimator:
- Plumbing (pipes, fixtures, valves)
- Sheathing (wall panels and accessories)
- Acoustical (ceiling units, grid and support)
- Framing (studs, track, accessories)
- Carpentry (wall types, crew labor, equipment)
- Mechanical (HVAC material and labor lines)
"""

from typing import Dict, Type

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.estimators.acoustical import AcousticalEstimator
from takeoff.estimators.carpentry import CarpentryEstimator
from takeoff.estimators.framing import FramingEstimator
from takeoff.estimators.mechanical import MechanicalEstimator
from takeoff.estimators.plumbing import PlumbingEstimator
from takeoff.estimators.sheathing import SheathingEstimator
from takeoff.models.records import Trade

ESTIMATORS: Dict[Trade, Type[TradeEstimator]] = {
    Trade.PLUMBING: PlumbingEstimator,
    Trade.SHEATHING: SheathingEstimator,
    Trade.ACOUSTICAL: AcousticalEstimator,
    Trade.FRAMING: FramingEstimator,
    Trade.CARPENTRY: CarpentryEstimator,
    Trade.MECHANICAL: MechanicalEstimator,
}

__all__ = [
    "TradeEstimate",
    "TradeEstimator",
    "PlumbingEstimator",
    "SheathingEstimator",
    "AcousticalEstimator",
    "FramingEstimator",
    "CarpentryEstimator",
    "MechanicalEstimator",
    "ESTIMATORS",
]
