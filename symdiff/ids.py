import logging
import threading
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariableId:
    index: int
    name: str = field(default=None, compare=False)

    def __repr__(self):
        return self.name if self.name is not None else f"v{self.index}"


class IDManager:
    """Mints VariableIds. Indices are never reused, even across threads."""

    def __init__(self):
        self._id_counter = 1
        self._lock = threading.Lock()

    def new_id(self, name=None):
        with self._lock:
            index = self._id_counter
            self._id_counter += 1
        new_id = VariableId(index, name)
        logger.debug("minted variable id %d (%r)", index, new_id)
        return new_id


idm = IDManager()
