"""
Toll module - trängselskatt per fordon och dag.

Exporterar alla publika funktioner.
"""

from .daily import (
    BillingInterval,
    BillingState,
    apply_daily_cap,
    bill_day,
    calculate_daily_fee,
)
from .fees import FEE_BANDS, calculate_passage_fee, fee_for_time
from .summary import summarize_daily_fee
from .toll_free_dates import get_toll_free_dates, is_toll_free_date, is_weekend
from .vehicles import (
    TOLL_FREE_VEHICLE_TYPES,
    TollFreeVehicle,
    get_vehicle_type,
    is_toll_free_vehicle,
)

__all__ = [
    # daily
    "calculate_daily_fee",
    "bill_day",
    "apply_daily_cap",
    "BillingInterval",
    "BillingState",
    # fees
    "calculate_passage_fee",
    "fee_for_time",
    "FEE_BANDS",
    # summary
    "summarize_daily_fee",
    # toll-free dates
    "get_toll_free_dates",
    "is_toll_free_date",
    "is_weekend",
    # vehicles
    "TollFreeVehicle",
    "TOLL_FREE_VEHICLE_TYPES",
    "get_vehicle_type",
    "is_toll_free_vehicle",
]
