"""
The module writes recorded state changes as JSON lines.

Each line describes one timeline:

```json
{"account":"0x…","variable":"balance","index":"","slots":["0x1"],
 "changes":[{"account":"0x00…","value":"0x00"},
             {"account":"0x2adc…","value":"0x64"}]}
```
"""

import json
from typing import Any, Dict, List, TextIO

from .state import State
from .state_changes import StateChanges
from .utils.hexadecimal import to_hex


def state_to_json(state: State) -> Dict[str, str]:
    """
    Convert a single observation to its JSON form.
    """
    return {"account": to_hex(state.account), "value": to_hex(state.value)}


def state_changes_to_json(state_changes: StateChanges) -> List[Dict[str, Any]]:
    """
    Convert every timeline in `state_changes` to its JSON form, in the order
    the timelines were first recorded.
    """
    output = []
    for account, variable_name, index, timeline in state_changes.timelines():
        output.append(
            {
                "account": to_hex(account),
                "variable": variable_name,
                "index": index,
                "slots": [
                    hex(slot)
                    for slot in state_changes.slots(account, variable_name)
                ],
                "changes": [state_to_json(state) for state in timeline],
            }
        )
    return output


def output_state_changes(
    state_changes: StateChanges, json_file: TextIO
) -> None:
    """
    Output every timeline in `state_changes` as one line of JSON each.
    """
    for entry in state_changes_to_json(state_changes):
        json.dump(entry, json_file, separators=(",", ":"))
        json_file.write("\n")
