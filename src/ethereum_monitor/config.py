"""
A module for managing monitor configurations.

Classes:
- MonitorConfig: Holds the options that control how state changes are
  recorded during an execution.
"""

from typing import Optional

from pydantic import BaseModel


class MonitorConfig(BaseModel):
    """
    A class for accessing state-change monitor configurations.
    """

    STRICT_SLOT_BINDING: bool = False
    """
    Raise `SlotRebindingError` instead of logging a warning when a slot that
    is already bound is recorded under a different variable name.
    """

    RECORD_STORAGE_READS: bool = True
    """Record storage reads seen by the trace adapter, not only writes."""

    LOG_LEVEL: Optional[str] = None
    """
    When set, the trace adapter attaches a stream logger at this level to the
    `ethereum_monitor` logger.
    """
