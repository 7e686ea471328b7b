"""
Easy Connect (DPP) status codes.

Two numbering schemes are involved:

- The status callback codes reported by the DPP engine
  (``EasyConnectSuccessStatus`` / ``EasyConnectFailureStatus``).
- The status types used in the exported telemetry record (``DppStatusType``).

The aggregator accepts callback codes and keys its histograms by export type.
"""

from __future__ import annotations

from enum import IntEnum


class EasyConnectSuccessStatus(IntEnum):
    """Success codes reported to the configurator."""

    SUCCESS_CONFIGURATION_SENT = 0
    SUCCESS_CONFIGURATION_APPLIED = 1


class EasyConnectFailureStatus(IntEnum):
    """Failure codes reported by the DPP engine."""

    FAILURE_INVALID_URI = -1
    FAILURE_AUTHENTICATION = -2
    FAILURE_NOT_COMPATIBLE = -3
    FAILURE_CONFIGURATION = -4
    FAILURE_BUSY = -5
    FAILURE_TIMEOUT = -6
    FAILURE_GENERIC = -7
    FAILURE_NOT_SUPPORTED = -8
    FAILURE_INVALID_NETWORK = -9
    FAILURE_CANNOT_FIND_NETWORK = -10
    FAILURE_ENROLLEE_AUTHENTICATION = -11
    FAILURE_ENROLLEE_REJECTED_CONFIGURATION = -12
    FAILURE_URI_GENERATION = -13
    FAILURE_ENROLLEE_FAILED_TO_SCAN_NETWORK_CHANNEL = -14


class DppStatusType(IntEnum):
    """Status types as they appear in the exported DPP log."""

    EASY_CONNECT_EVENT_UNKNOWN = 0
    EASY_CONNECT_EVENT_SUCCESS_CONFIGURATION_SENT = 1
    EASY_CONNECT_EVENT_SUCCESS_CONFIGURATION_APPLIED = 2
    EASY_CONNECT_EVENT_FAILURE_INVALID_URI = 3
    EASY_CONNECT_EVENT_FAILURE_AUTHENTICATION = 4
    EASY_CONNECT_EVENT_FAILURE_NOT_COMPATIBLE = 5
    EASY_CONNECT_EVENT_FAILURE_CONFIGURATION = 6
    EASY_CONNECT_EVENT_FAILURE_BUSY = 7
    EASY_CONNECT_EVENT_FAILURE_TIMEOUT = 8
    EASY_CONNECT_EVENT_FAILURE_GENERIC = 9
    EASY_CONNECT_EVENT_FAILURE_NOT_SUPPORTED = 10
    EASY_CONNECT_EVENT_FAILURE_INVALID_NETWORK = 11
    EASY_CONNECT_EVENT_FAILURE_CANNOT_FIND_NETWORK = 12
    EASY_CONNECT_EVENT_FAILURE_ENROLLEE_AUTHENTICATION = 13
    EASY_CONNECT_EVENT_FAILURE_ENROLLEE_REJECTED_CONFIGURATION = 14
    EASY_CONNECT_EVENT_FAILURE_URI_GENERATION = 15
    EASY_CONNECT_EVENT_FAILURE_ENROLLEE_FAILED_TO_SCAN_NETWORK_CHANNEL = 16


SUCCESS_STATUS_TYPES: dict[int, DppStatusType] = {
    EasyConnectSuccessStatus.SUCCESS_CONFIGURATION_SENT: (
        DppStatusType.EASY_CONNECT_EVENT_SUCCESS_CONFIGURATION_SENT
    ),
    EasyConnectSuccessStatus.SUCCESS_CONFIGURATION_APPLIED: (
        DppStatusType.EASY_CONNECT_EVENT_SUCCESS_CONFIGURATION_APPLIED
    ),
}

# Callback failure codes share their suffix with the export names.
FAILURE_STATUS_TYPES: dict[int, DppStatusType] = {
    code: DppStatusType[f"EASY_CONNECT_EVENT_{code.name}"] for code in EasyConnectFailureStatus
}


def success_status_type(code: int) -> DppStatusType | None:
    """Map a success callback code to its export type, or None if unrecognized."""
    return SUCCESS_STATUS_TYPES.get(code)


def failure_status_type(code: int) -> DppStatusType | None:
    """Map a failure callback code to its export type, or None if unrecognized."""
    return FAILURE_STATUS_TYPES.get(code)
