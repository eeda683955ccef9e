"""
Monitor
^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A `Monitor` holds the state changes recorded during a single execution,
usually one transaction. A fresh monitor is created for every execution and
passed explicitly to whoever records into it or reads from it afterwards.
"""
from typing import Optional

from .config import MonitorConfig
from .state_changes import StateChanges


class Monitor:
    """
    Owns the `StateChanges` of one execution.
    """

    def __init__(self, config: Optional[MonitorConfig] = None) -> None:
        if config is None:
            config = MonitorConfig()
        self._config = config
        self._states = StateChanges(
            strict_slot_binding=config.STRICT_SLOT_BINDING
        )

    @property
    def config(self) -> MonitorConfig:
        """Configuration this monitor was created with."""
        return self._config

    def state_changes(self) -> StateChanges:
        """
        The change log of this execution, for the engine to record into and
        for consumers to read once execution completes.
        """
        return self._states
