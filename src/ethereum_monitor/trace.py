"""
Defines the events an execution engine emits to have its storage monitored,
and tracers that turn those events into recorded state changes.

The engine does not need to know about `StateChanges`: at every storage
access it emits a [`StorageRead`] or [`StorageWrite`], bracketed by
[`TransactionStart`] and [`TransactionEnd`], to whichever [`MonitorTracer`]
it was given. [`TransactionMonitor`] opens a fresh [`Monitor`] for every
transaction and hands the finished ones over in `monitors`.

[`StorageRead`]: ref:ethereum_monitor.trace.StorageRead
[`StorageWrite`]: ref:ethereum_monitor.trace.StorageWrite
[`TransactionStart`]: ref:ethereum_monitor.trace.TransactionStart
[`TransactionEnd`]: ref:ethereum_monitor.trace.TransactionEnd
[`MonitorTracer`]: ref:ethereum_monitor.trace.MonitorTracer
[`TransactionMonitor`]: ref:ethereum_monitor.trace.TransactionMonitor
[`Monitor`]: ref:ethereum_monitor.monitor.Monitor
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Union

from ethereum_types.bytes import Bytes

from .config import MonitorConfig
from .exceptions import MonitorException
from .monitor import Monitor
from .state import Address, State
from .state_changes import SlotLike
from .utils import get_stream_logger

logger = logging.getLogger(__name__)


@dataclass
class TransactionStart:
    """
    Trace event that is triggered at the start of a transaction.
    """


@dataclass
class TransactionEnd:
    """
    Trace event that is triggered at the end of a transaction.
    """


@dataclass
class StorageRead:
    """
    Trace event that is triggered when a storage slot is read.
    """

    account: Address
    """
    Account whose storage was read.
    """

    variable_name: str
    """
    Logical name of the variable stored at `slot`, as decoded by the engine
    from the contract's storage layout.
    """

    slot: SlotLike
    """
    Storage slot that was read.
    """

    index: str
    """
    Element of the variable that was read.
    """

    value: Bytes
    """
    Raw value that was read.
    """

    caller: Address
    """
    Account whose execution performed the read.
    """


@dataclass
class StorageWrite:
    """
    Trace event that is triggered when a storage slot is written.
    """

    account: Address
    """
    Account whose storage was written.
    """

    variable_name: str
    """
    Logical name of the variable stored at `slot`.
    """

    slot: SlotLike
    """
    Storage slot that was written.
    """

    index: str
    """
    Element of the variable that was written.
    """

    value: Bytes
    """
    Raw value that was written.
    """

    caller: Address
    """
    Account whose execution caused the write.
    """


MonitorEvent = Union[
    TransactionStart,
    TransactionEnd,
    StorageRead,
    StorageWrite,
]
"""
All possible types of events that a [`MonitorTracer`] is expected to handle.

[`MonitorTracer`]: ref:ethereum_monitor.trace.MonitorTracer
"""


class MonitorTracer(Protocol):
    """
    [`Protocol`] that describes tracer functions.

    [`Protocol`]: https://docs.python.org/3/library/typing.html#typing.Protocol
    """

    def __call__(self, event: MonitorEvent, /) -> None:
        """
        Call `self` as a function, handling a monitor event.
        """


def discard_monitor_trace(event: MonitorEvent) -> None:
    """
    A [`MonitorTracer`] that discards all events.

    [`MonitorTracer`]: ref:ethereum_monitor.trace.MonitorTracer
    """


class TransactionMonitor:
    """
    A [`MonitorTracer`] that records storage events into one `Monitor` per
    transaction.

    [`MonitorTracer`]: ref:ethereum_monitor.trace.MonitorTracer
    """

    def __init__(self, config: Optional[MonitorConfig] = None) -> None:
        if config is None:
            config = MonitorConfig()
        self.config = config
        self.monitors: List[Monitor] = []
        self.active: Optional[Monitor] = None

        if config.LOG_LEVEL is not None:
            get_stream_logger("ethereum_monitor", config.LOG_LEVEL)

    def __call__(self, event: MonitorEvent) -> None:
        """
        Handle a monitor event.
        """
        if isinstance(event, TransactionStart):
            if self.active is not None:
                raise MonitorException("transaction already started")
            self.active = Monitor(self.config)
            logger.debug("transaction %d started", len(self.monitors))
        elif isinstance(event, TransactionEnd):
            monitor = self._require_active()
            self.monitors.append(monitor)
            self.active = None
            logger.debug(
                "transaction %d ended, %d storage timelines recorded",
                len(self.monitors) - 1,
                len(monitor.state_changes()),
            )
        elif isinstance(event, StorageRead):
            monitor = self._require_active()
            if not self.config.RECORD_STORAGE_READS:
                return
            monitor.state_changes().record(
                event.account,
                event.variable_name,
                event.slot,
                event.index,
                State(account=event.caller, value=event.value),
            )
        elif isinstance(event, StorageWrite):
            monitor = self._require_active()
            monitor.state_changes().record(
                event.account,
                event.variable_name,
                event.slot,
                event.index,
                State(account=event.caller, value=event.value),
            )
        else:
            raise TypeError(f"unknown monitor event {type(event).__name__}")

    def _require_active(self) -> Monitor:
        if self.active is None:
            raise MonitorException("no transaction in progress")
        return self.active
