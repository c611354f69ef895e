import asyncio
import random
from typing import Optional

from config import ERROR_PREFIX, MSG_LOADING, NEXT_KEY, START_POKEMON_ID
from fetch_gateway import FetchError, FetchGateway, InvalidIdentifier
from navigation import NavigationState
from presenter import MalformedRecord, Record, describe_record


class Navigator:
    """
    Owns the navigation state, the gateway and a view, and runs the
    navigation -> fetch -> render cycle.

    The view is anything with:
      apply(description), show_status(message, kind),
      hide_status(), set_controls_enabled(enabled)
    """

    def __init__(self, view, gateway: Optional[FetchGateway] = None,
                 state: Optional[NavigationState] = None, rng: Optional[random.Random] = None):
        self.view = view
        self.state = state or NavigationState()
        self.gateway = gateway or FetchGateway(max_id=self.state.max_id)
        self.rng = rng
        # Last dispatched cycle; at most one is in flight
        self.task: Optional[asyncio.Task] = None

    # ---
    # Intents
    # ---

    def go_next(self):
        return self.request_navigation(self.state.next_id())

    def go_previous(self):
        return self.request_navigation(self.state.previous_id())

    def go_random(self):
        return self.request_navigation(self.state.random_id(self.rng))

    def start(self):
        return self.request_navigation(START_POKEMON_ID)

    def handle_key(self, key: str):
        if key == NEXT_KEY and not self.state.busy:
            return self.go_next()
        return None

    # ---
    # Gate
    # ---

    def request_navigation(self, target_id: int) -> Optional[asyncio.Task]:
        """
        Checked synchronously, before anything is scheduled: a request that
        arrives while Busy is dropped and None is returned.
        """
        if self.state.busy:
            print(f"LOG: Navigation to {target_id} dropped (busy).")
            return None

        try:
            self.gateway.validate(target_id)
        except InvalidIdentifier as e:
            print(f"Error: invalid id {target_id!r} (valid range 1-{e.max_id})")
            self.view.show_status(e.message, "error")
            return None

        self.state.begin()
        try:
            self.view.set_controls_enabled(False)
            self.view.show_status(MSG_LOADING, "info")
            self.task = asyncio.ensure_future(self._run(target_id))
        except Exception as e:
            print(f"CRITICAL: Could not dispatch navigation to {target_id}. Error: {e}")
            self.state.finish()
            self.view.set_controls_enabled(True)
            raise
        return self.task

    async def _run(self, target_id: int) -> bool:
        try:
            payload = await self.gateway.fetch_record(target_id)
            record = Record.from_payload(payload)
            if not 1 <= record.id <= self.state.max_id:
                raise MalformedRecord(f"id {record.id} out of range")
            description = describe_record(record)

            self.state.commit(record.id)
            self.view.hide_status()
            self.view.apply(description)
            print(f"LOG: Loaded #{record.id} {record.name}")
            return True

        except FetchError as e:
            print(f"Error fetching Pokémon {target_id}: {e.message}")
            self.view.show_status(f"{ERROR_PREFIX}{e.message}", "error")
            return False

        except Exception as e:
            print(f"CRITICAL: Navigation to {target_id} failed. Error: {e}")
            self.view.show_status(f"{ERROR_PREFIX}{e}", "error")
            return False

        finally:
            self.state.finish()
            self.view.set_controls_enabled(True)
