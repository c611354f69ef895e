import asyncio
from pyodide.ffi import create_proxy
from pyscript import document

from dom_view import DomView
from navigator import Navigator

# ==========================================
# BLOCK 1. EVENT BINDINGS
# ==========================================

def _listener(intent):
    """Wraps a navigator intent as a DOM listener. The navigator keeps the scheduled task."""
    def handler(event=None):
        intent()
    return create_proxy(handler)


def bind_events(navigator, doc=None):
    """Hooks the three buttons and the keyboard shortcut."""
    doc = doc or document
    intents = {
        "btnPrevious": navigator.go_previous,
        "btnNext": navigator.go_next,
        "btnRandom": navigator.go_random,
    }
    for btn_id, intent in intents.items():
        btn = doc.getElementById(btn_id)
        if not btn:
            print(f"LOG: #{btn_id} not found, skipping binding.")
            continue
        btn.addEventListener("click", _listener(intent))

    @create_proxy
    def on_keydown(event):
        navigator.handle_key(event.key)

    doc.addEventListener("keydown", on_keydown)


# ==========================================
# BLOCK 2. INITIALIZATION (BOOTLOADER)
# ==========================================

async def main():
    """Builds the navigator, hooks the page, loads the first entry."""
    view = DomView(document)
    navigator = Navigator(view)
    bind_events(navigator)

    task = navigator.start()
    if task is not None:
        await task
    print("Pokédex is ready.")

asyncio.ensure_future(main())
