"""
Ethereum State Monitor
^^^^^^^^^^^^^^^^^^^^^^
Records how the persistent storage of every account touched by an execution
changes over the course of that execution, so that debuggers, explainers and
tests can replay the history of a variable afterwards.

Storage is looked up either by the logical name of a variable (as decoded
from a contract's storage layout by the execution engine) or by the raw
storage slot that backs it.

The execution engine itself is not part of this package. It reports storage
accesses by calling `StateChanges.record` on the `Monitor` it was handed, or
by emitting the events defined in `ethereum_monitor.trace`.
"""

from .config import MonitorConfig
from .monitor import Monitor
from .state import EMPTY_ADDRESS, State
from .state_changes import StateChanges

__version__ = "0.1.0"

__all__ = [
    "EMPTY_ADDRESS",
    "Monitor",
    "MonitorConfig",
    "State",
    "StateChanges",
]
