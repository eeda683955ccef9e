import io
import json

from ethereum_monitor import Monitor, State
from ethereum_monitor.output import output_state_changes, state_changes_to_json
from ethereum_monitor.utils.hexadecimal import hex_to_address

ADDRESS_TOKEN = hex_to_address("0x00000000219ab540356cbb839cbe05303d7705fa")
ADDRESS_BOB = hex_to_address("0x2adc25665018aa1fe0e6bc666dac8fc2697ff9ba")


def test_output_state_changes() -> None:
    monitor = Monitor()
    changes = monitor.state_changes()
    changes.record(
        ADDRESS_TOKEN, "balance", 1, "", State(ADDRESS_BOB, b"\x00")
    )
    changes.record(
        ADDRESS_TOKEN, "balance", 1, "", State(ADDRESS_BOB, b"\x64")
    )
    changes.record(
        ADDRESS_TOKEN, "holders", 10, "0x02", State(ADDRESS_BOB, b"\x01")
    )

    json_file = io.StringIO()
    output_state_changes(changes, json_file)
    lines = json_file.getvalue().splitlines()

    assert len(lines) == 2
    assert json.loads(lines[0]) == {
        "account": "0x00000000219ab540356cbb839cbe05303d7705fa",
        "variable": "balance",
        "index": "",
        "slots": ["0x1"],
        "changes": [
            {"account": "0x" + "00" * 20, "value": "0x00"},
            {
                "account": "0x2adc25665018aa1fe0e6bc666dac8fc2697ff9ba",
                "value": "0x64",
            },
        ],
    }
    assert json.loads(lines[1])["slots"] == ["0xa"]
    assert json.loads(lines[1])["index"] == "0x02"


def test_empty_output() -> None:
    json_file = io.StringIO()
    output_state_changes(Monitor().state_changes(), json_file)

    assert json_file.getvalue() == ""
    assert state_changes_to_json(Monitor().state_changes()) == []
