"""
Local snapshot of the user's lists plus a queue of item mutations made while
offline.

Everything lives in one JSON file. Reading never raises: a missing, corrupt
or unreadable file behaves like an empty cache. Write failures are logged
and otherwise ignored so an offline UI keeps working.
"""

import contextlib
import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LISTS_KEY = 'lists'
QUEUE_KEY = 'queue'


class OfflineCache:

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable offline cache %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write then rename so a crash never leaves half a file behind
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix='.cache-')
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(data, fh)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not write offline cache %s: %s", self.path, exc)
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)

    # Lists snapshot

    def get_cached_lists(self) -> Optional[list]:
        """Last saved lists, or None if nothing usable was saved."""
        lists = self._read().get(LISTS_KEY)
        return lists if isinstance(lists, list) else None

    def set_cached_lists(self, lists: list) -> None:
        data = self._read()
        data[LISTS_KEY] = list(lists)
        self._write(data)

    # Mutation queue

    def enqueue_mutation(self, mutation_type: str, payload: dict) -> dict:
        """Append a mutation stamped with the current time in milliseconds."""
        mutation = {
            'type': mutation_type,
            'payload': payload,
            'ts': int(time.time() * 1000),
        }
        data = self._read()
        queue = data.get(QUEUE_KEY)
        if not isinstance(queue, list):
            queue = []
        queue.append(mutation)
        data[QUEUE_KEY] = queue
        self._write(data)
        return mutation

    def get_offline_queue(self) -> list:
        queue = self._read().get(QUEUE_KEY)
        return queue if isinstance(queue, list) else []

    def replace_offline_queue(self, mutations: list) -> None:
        data = self._read()
        data[QUEUE_KEY] = list(mutations)
        self._write(data)

    def clear_offline_queue(self) -> None:
        self.replace_offline_queue([])
