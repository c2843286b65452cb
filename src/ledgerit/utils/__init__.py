"""Utility functions for ledgerit."""

from ledgerit.utils.date_parser import parse_date
from ledgerit.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
