"""State snapshot encoding and the backends that hold store state."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from proposal_engine.core.config import Settings, get_settings
from proposal_engine.core.exceptions import SnapshotError
from proposal_engine.models import StoreState

logger = logging.getLogger(__name__)


# ===========================================
# Encoding
# ===========================================

def dump_state(state: StoreState) -> str:
    """Serialize store state to JSON with camelCase keys and ISO-8601 dates."""
    return state.model_dump_json(by_alias=True)


def load_state(text: Union[str, bytes]) -> StoreState:
    """
    Re-hydrate store state from a JSON snapshot.

    Raises:
        SnapshotError: If the text is not valid JSON or not a valid state
    """
    try:
        return StoreState.model_validate_json(text)
    except ValidationError as e:
        raise SnapshotError(f"Invalid proposal snapshot: {e}") from e


# ===========================================
# Backends
# ===========================================

class StateBackend(ABC):
    """Holds the store's current state snapshot."""

    @abstractmethod
    def load(self) -> StoreState:
        """Return the current state."""

    @abstractmethod
    def save(self, state: StoreState) -> None:
        """Replace the current state."""


class InMemoryBackend(StateBackend):
    """Keeps state in process memory only."""

    def __init__(self, state: Optional[StoreState] = None):
        self._state = state or StoreState()

    def load(self) -> StoreState:
        return self._state

    def save(self, state: StoreState) -> None:
        self._state = state


class JsonFileBackend(StateBackend):
    """
    Keeps state in a JSON file.

    The file is read once on first load and rewritten after every commit.
    A missing file means an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._state: Optional[StoreState] = None

    def load(self) -> StoreState:
        if self._state is None:
            self._state = self._read()
        return self._state

    def save(self, state: StoreState) -> None:
        self._state = state
        self._write(state)

    def _read(self) -> StoreState:
        if not self.path.exists():
            logger.info(f"No snapshot at {self.path} - starting empty")
            return StoreState()
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read snapshot {self.path}: {e}")
            raise
        state = load_state(text)
        logger.info(f"Loaded {len(state.proposals)} proposals from {self.path}")
        return state

    def _write(self, state: StoreState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(dump_state(state))
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write snapshot {self.path}: {e}")
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Saved snapshot with {len(state.proposals)} proposals to {self.path}")


def build_backend(settings: Optional[Settings] = None) -> StateBackend:
    """Pick the backend configured by ``SNAPSHOT_PATH``."""
    settings = settings or get_settings()
    if settings.SNAPSHOT_PATH:
        return JsonFileBackend(settings.SNAPSHOT_PATH)
    return InMemoryBackend()
