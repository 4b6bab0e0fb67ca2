"""Smoke script for the conversion form view model.

Sequence:
 1. Build the view model and record every property change.
 2. Type an invalid amount (Convert disabled), then a valid one.
 3. Convert, swap, convert again, then clear.
 4. Pick an unsupported currency and convert.

Commands are invoked by name, the way a view binds them.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

import json

from fxform.core.config import Settings
from fxform.main import create_view_model


def run():
    vm = create_view_model(settings_override=Settings(debug=True, log_format="text"))
    changes = []
    vm.subscribe(changes.append)
    out = {"currencies": vm.currencies}

    def availability():
        return {cmd.name: cmd.can_execute() for cmd in vm.commands}

    def invoke(name):
        vm.commands[name].execute()
        return vm.state.snapshot()

    vm.amount_text = "abc"
    out["available_invalid"] = availability()

    vm.amount_text = "1.234,5"
    out["available_valid"] = availability()

    out["convert"] = invoke("convert")
    out["after_swap"] = invoke("swap")
    out["convert_swapped"] = invoke("convert")
    out["after_clear"] = invoke("clear")

    vm.amount_text = "5"
    vm.from_code = "XXX"
    out["unsupported"] = invoke("convert")

    vm.amount_text = "1" + "0" * 26
    vm.from_code = "USD"
    vm.to_code = "BRL"
    out["large_amount"] = invoke("convert")

    out["changes"] = changes
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return out


if __name__ == "__main__":
    run()
