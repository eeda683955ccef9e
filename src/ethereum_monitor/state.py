"""
Observed State
^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

A `State` is a single observation of a piece of persistent storage: the raw
bytes that were seen, and the account whose execution caused them. Two
observations are equal when both the account and the value bytes match.
"""
from dataclasses import dataclass

from ethereum_types.bytes import Bytes, Bytes20
from ethereum_types.frozen import modify, slotted_freezable

Address = Bytes20

EMPTY_ADDRESS = Bytes20(b"\x00" * 20)
"""
Placeholder account meaning "no specific account". Baseline observations are
always attributed to it.
"""


@slotted_freezable
@dataclass
class State:
    """
    Raw value of a piece of storage, and the account that caused it.
    """

    account: Address
    value: Bytes


def as_baseline(state: State) -> State:
    """
    Return a copy of `state` that is attributed to no specific account.

    Parameters
    ----------
    state :
        The observed state.

    Returns
    -------
    baseline : `State`
        Same value as `state`, with the account set to `EMPTY_ADDRESS`.
    """

    def clear_account(baseline: State) -> None:
        baseline.account = EMPTY_ADDRESS

    return modify(state, clear_account)
