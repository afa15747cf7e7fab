# shiftcal/engine - Rotation calculation
from .calculator import ShiftCalculator

__all__ = ["ShiftCalculator"]
