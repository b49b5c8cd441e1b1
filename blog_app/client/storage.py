import json
import logging
import os


logger = logging.getLogger(__name__)


class LocalStorage:
    """
    String key/value storage that survives between runs of the client.

    Items are kept in a JSON file at `path`; without a path the items
    only live in memory.
    """

    def __init__(self, path=None):
        self.path = path
        self._items = self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return {}
        with open(self.path, encoding='utf-8') as storage_file:
            try:
                items = json.load(storage_file)
            except json.JSONDecodeError:
                logger.warning('Ignoring unreadable client storage file: %s', self.path)
                return {}
        return {str(key): str(value) for key, value in items.items()}

    def _save(self):
        if not self.path:
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as storage_file:
            json.dump(self._items, storage_file, indent=2)

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)
        self._save()

    def remove_item(self, key):
        if self._items.pop(key, None) is not None:
            self._save()

    def __contains__(self, key):
        return key in self._items
