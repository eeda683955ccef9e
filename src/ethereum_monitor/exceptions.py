"""
Error types raised by the state-change monitor.
"""


class MonitorException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown while monitoring an
    execution.
    """


class InvalidArgument(MonitorException, ValueError):
    """
    Thrown when an instrumentation call site passes an argument the monitor
    cannot accept.
    """


class InvalidSlot(InvalidArgument):
    """
    Thrown when a state change is recorded without the storage slot that
    backs it.
    """


class SlotRebindingError(InvalidArgument):
    """
    Thrown, in strict mode, when a storage slot that is already bound to a
    variable name is recorded again under a different name.
    """
