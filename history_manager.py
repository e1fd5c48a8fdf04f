import logging
import os
from typing import List

logger = logging.getLogger(__name__)


class HistoryManager:
    def __init__(self, history_path: str, max_items: int = 100):
        self.history_path = history_path
        self.max_items = max_items
        self.history: List[str] = []

    def load(self) -> List[str]:
        if not os.path.exists(self.history_path):
            self.history = []
            return self.history
        try:
            with open(self.history_path, 'r', encoding='utf-8') as f:
                data = [l.rstrip('\n') for l in f if l.strip()]
        except OSError as e:
            logger.warning("Could not read history %s: %s", self.history_path, e)
            data = []
        self.history = data[-self.max_items:]
        if len(data) > self.max_items:
            self._rewrite()
        return self.history

    def _rewrite(self) -> None:
        try:
            with open(self.history_path, 'w', encoding='utf-8') as f:
                f.write('\n'.join(self.history) + ('\n' if self.history else ''))
        except OSError as e:
            logger.warning("Could not trim history %s: %s", self.history_path, e)

    def append(self, entry: str) -> None:
        if not entry:
            return
        self.history.append(entry)
        if len(self.history) > self.max_items:
            self.history = self.history[-self.max_items:]

    def persist(self, entry: str) -> None:
        if not entry:
            return
        try:
            with open(self.history_path, 'a', encoding='utf-8') as f:
                f.write(entry + '\n')
        except OSError as e:
            # best-effort
            logger.warning("Could not write history %s: %s", self.history_path, e)

    def record(self, entry: str) -> None:
        self.append(entry)
        self.persist(entry)

    @property
    def items(self) -> List[str]:
        return list(self.history)
