import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import MAX_POKEMON_ID, START_POKEMON_ID


class Phase(Enum):
    IDLE = "IDLE"
    BUSY = "BUSY"


def _check_max(max_id: int):
    if max_id < 1:
        raise ValueError(f"max_id must be >= 1, got {max_id}")


def compute_next(current: int, max_id: int) -> int:
    """Next identifier, wrapping from max_id back to 1."""
    _check_max(max_id)
    new_id = current + 1
    if new_id > max_id or new_id < 1:
        new_id = 1
    return new_id


def compute_previous(current: int, max_id: int) -> int:
    """Previous identifier, wrapping from 1 back to max_id."""
    _check_max(max_id)
    new_id = current - 1
    if new_id < 1 or new_id > max_id:
        new_id = max_id
    return new_id


def compute_random(max_id: int, rng: Optional[random.Random] = None) -> int:
    _check_max(max_id)
    return (rng or random).randint(1, max_id)


@dataclass
class NavigationState:
    """
    Session-wide navigation state.
    current_id only moves on a committed (successful) fetch; phase is the
    Idle/Busy gate that keeps at most one fetch in flight.
    """
    current_id: int = START_POKEMON_ID
    max_id: int = MAX_POKEMON_ID
    phase: Phase = Phase.IDLE

    def __post_init__(self):
        _check_max(self.max_id)
        if not 1 <= self.current_id <= self.max_id:
            raise ValueError(f"current_id {self.current_id} outside [1, {self.max_id}]")

    @property
    def busy(self) -> bool:
        return self.phase is Phase.BUSY

    def begin(self) -> bool:
        # Dropped, not queued
        if self.busy:
            return False
        self.phase = Phase.BUSY
        return True

    def finish(self):
        self.phase = Phase.IDLE

    def commit(self, record_id: int):
        if not 1 <= record_id <= self.max_id:
            raise ValueError(f"record id {record_id} outside [1, {self.max_id}]")
        self.current_id = record_id

    def next_id(self) -> int:
        return compute_next(self.current_id, self.max_id)

    def previous_id(self) -> int:
        return compute_previous(self.current_id, self.max_id)

    def random_id(self, rng: Optional[random.Random] = None) -> int:
        return compute_random(self.max_id, rng)
