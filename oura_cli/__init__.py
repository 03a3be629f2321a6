"""Oura Ring CLI - Python client and terminal reports for Oura health data."""

from oura_cli.client import OuraClient
from oura_cli.errors import (
    DecodeError,
    InvalidEndpointError,
    InvalidDateError,
    MissingCredentialError,
    OuraError,
    TransportError,
    UpstreamError,
)
from oura_cli.models import (
    DailyActivity,
    DailyReadiness,
    DailySleep,
    DailyStress,
    DateRange,
    SleepPeriod,
    TrendRow,
    TrendTable,
)

__version__ = "0.1.0"
__all__ = [
    "OuraClient",
    "DailyActivity",
    "DailyReadiness",
    "DailySleep",
    "DailyStress",
    "DateRange",
    "DecodeError",
    "InvalidEndpointError",
    "InvalidDateError",
    "MissingCredentialError",
    "OuraError",
    "SleepPeriod",
    "TransportError",
    "TrendRow",
    "TrendTable",
    "UpstreamError",
]
