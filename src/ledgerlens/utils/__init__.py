"""Utility functions for ledgerlens."""

from ledgerlens.utils.months import parse_month, month_start, shift_month
from ledgerlens.utils.amount_parser import parse_amount, to_amount

__all__ = ["parse_month", "month_start", "shift_month", "parse_amount", "to_amount"]
