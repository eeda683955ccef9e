"""
State Changes
^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

`StateChanges` records, for every account touched by an execution, the
sequence of values each piece of persistent storage took on.

A timeline is keyed by `(account, variable name, index)`, where the index is
an opaque string distinguishing the elements of composite variables (array
elements, mapping entries). A second table binds each `(account, slot)` pair
to the variable name it was first recorded under, so that timelines can be
looked up either by name or by storage slot.

Timelines only ever grow. The first observation of every timeline is the
baseline (the value before execution) and is attributed to `EMPTY_ADDRESS`.
A new observation equal to the last one in its timeline is dropped, and so is
a repeat of the first observation while the baseline is the only entry.
"""
import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U256

from .exceptions import InvalidArgument, InvalidSlot, SlotRebindingError
from .state import Address, State, as_baseline
from .utils.ensure import ensure

logger = logging.getLogger(__name__)

Slot = U256
SlotLike = Union[U256, int, Bytes]
Timeline = Tuple[State, ...]


def to_slot(slot: SlotLike) -> Slot:
    """
    Normalize a storage slot to `U256`.

    Execution engines address storage with 32 byte big endian keys, while
    callers usually know slots as integers. Both forms name the same slot.

    Parameters
    ----------
    slot :
        Slot number or big endian storage key.

    Returns
    -------
    slot : `U256`
        The normalized slot.
    """
    if isinstance(slot, U256):
        return slot
    try:
        if isinstance(slot, bytes):
            return U256.from_be_bytes(slot)
        return U256(slot)
    except (ValueError, OverflowError, TypeError) as e:
        raise InvalidArgument(f"invalid storage slot {slot!r}") from e


class StateChanges:
    """
    Change log of the storage observed during one execution.
    """

    def __init__(self, strict_slot_binding: bool = False) -> None:
        """
        Create an empty change log.

        Parameters
        ----------
        strict_slot_binding :
            Raise `SlotRebindingError` when a bound slot is recorded under a
            different variable name, instead of keeping the first name and
            logging a warning.
        """
        self.strict_slot_binding = strict_slot_binding
        self._slot_index: Dict[Tuple[Address, Slot], str] = {}
        self._changes: Dict[Tuple[Address, str, str], List[State]] = {}
        self._first_observations: Dict[Tuple[Address, str, str], State] = (
            {}
        )

    def record(
        self,
        account: Address,
        variable_name: str,
        slot: Optional[SlotLike],
        index: str,
        new_state: State,
    ) -> None:
        """
        Record an observed value of a piece of storage.

        The first call for an `(account, slot)` pair binds the slot to
        `variable_name`; the binding is never overwritten. The observation is
        appended to the `(account, variable_name, index)` timeline unless it
        equals the last entry there, or repeats the observation a lone
        baseline was made from. The first entry of a timeline is stored as a
        baseline, attributed to `EMPTY_ADDRESS`.

        Parameters
        ----------
        account :
            Account owning the storage.
        variable_name :
            Logical name of the storage variable.
        slot :
            Storage slot backing the variable. Required.
        index :
            Element of the variable (array index, mapping key, or a constant
            for scalars).
        new_state :
            The observed value and the account that caused it.
        """
        ensure(slot is not None, InvalidSlot("slot cannot be None"))
        assert slot is not None
        slot = to_slot(slot)

        bound_name = self._slot_index.get((account, slot))
        if bound_name is None:
            self._slot_index[(account, slot)] = variable_name
        elif bound_name != variable_name:
            if self.strict_slot_binding:
                raise SlotRebindingError(
                    f"slot {slot} of 0x{account.hex()} is bound to "
                    f"{bound_name!r}, not {variable_name!r}"
                )
            logger.warning(
                "slot %s of 0x%s is already bound to %r, ignoring name %r",
                slot,
                account.hex(),
                bound_name,
                variable_name,
            )

        key = (account, variable_name, index)
        timeline = self._changes.setdefault(key, [])

        if not timeline:
            self._first_observations[key] = new_state
            new_state = as_baseline(new_state)
        elif timeline[-1] == new_state:
            return
        elif len(timeline) == 1 and new_state == self._first_observations[key]:
            # The baseline no longer carries the account that observed it.
            return

        timeline.append(new_state)
        logger.debug(
            "recorded %s[%r] of 0x%s = 0x%s (%d changes)",
            variable_name,
            index,
            account.hex(),
            new_state.value.hex(),
            len(timeline),
        )

    def variable(
        self, account: Address, variable_name: str, index: str
    ) -> Optional[Timeline]:
        """
        Look up the timeline of a variable by name.

        Parameters
        ----------
        account :
            Account owning the storage.
        variable_name :
            Logical name of the storage variable.
        index :
            Element of the variable.

        Returns
        -------
        timeline : `Optional[Tuple[State, ...]]`
            Observations in record order, or `None` if nothing was recorded.
        """
        timeline = self._changes.get((account, variable_name, index))
        if timeline is None:
            return None

        return tuple(timeline)

    def slot(
        self, account: Address, slot: Optional[SlotLike], index: str
    ) -> Optional[Timeline]:
        """
        Look up the timeline of a variable by the storage slot backing it.

        Parameters
        ----------
        account :
            Account owning the storage.
        slot :
            Storage slot backing the variable.
        index :
            Element of the variable.

        Returns
        -------
        timeline : `Optional[Tuple[State, ...]]`
            Observations in record order, or `None` if `slot` is `None`, is
            not a valid slot, or was never recorded for `account`.
        """
        if slot is None:
            return None

        variable_name = self.variable_name(account, slot)
        if variable_name is None:
            return None

        return self.variable(account, variable_name, index)

    def variable_name(
        self, account: Address, slot: SlotLike
    ) -> Optional[str]:
        """
        Get the variable name a storage slot of `account` is bound to.

        Parameters
        ----------
        account :
            Account owning the storage.
        slot :
            Slot number or big endian storage key.

        Returns
        -------
        variable_name : `Optional[str]`
            Name the slot was first recorded under, or `None` if the slot is
            unbound or could never be bound.
        """
        try:
            slot = to_slot(slot)
        except InvalidArgument:
            return None

        return self._slot_index.get((account, slot))

    def slots(self, account: Address, variable_name: str) -> Tuple[Slot, ...]:
        """
        Get every slot of `account` bound to `variable_name`.

        Parameters
        ----------
        account :
            Account owning the storage.
        variable_name :
            Logical name of the storage variable.

        Returns
        -------
        slots : `Tuple[U256, ...]`
            Bound slots in binding order, empty if there are none.
        """
        return tuple(
            slot
            for (bound_account, slot), name in self._slot_index.items()
            if bound_account == account and name == variable_name
        )

    def timelines(self) -> Iterator[Tuple[Address, str, str, Timeline]]:
        """
        Iterate over every recorded timeline, in the order each was first
        recorded.
        """
        for (account, variable_name, index), timeline in self._changes.items():
            yield account, variable_name, index, tuple(timeline)

    def __len__(self) -> int:
        return len(self._changes)
