from __future__ import annotations
import os
import shelve
import threading
from abc import ABC, abstractmethod
from typing import Optional


class UserStorage(ABC):

    """Stores the id of the user that logged in through :class:`~.AuthManager`

    Implementations must be safe to call from several threads.
    """

    @abstractmethod
    def get_user_id(self) -> Optional[int]:
        ...

    @abstractmethod
    def set_user_id(self, user_id: int) -> None:
        ...

    @abstractmethod
    def clear_user_id(self) -> None:
        ...


class MemoryUserStorage(UserStorage):

    """Keeps the user id for the lifetime of the process"""

    def __init__(self, user_id: Optional[int] = None):
        self._lock = threading.Lock()
        self._user_id = user_id

    def get_user_id(self) -> Optional[int]:
        with self._lock:
            return self._user_id

    def set_user_id(self, user_id: int) -> None:
        with self._lock:
            self._user_id = user_id

    def clear_user_id(self) -> None:
        with self._lock:
            self._user_id = None


class ShelveUserStorage(UserStorage):

    """Persists the user id in a :mod:`shelve` database, so a session survives restarts

    :cvar KEY: the key the user id is stored under
    """

    KEY = 'user_id'

    def __init__(self, path: str):
        """
        :param path: filename of the shelf; the directory is created if needed
        """
        if directory := os.path.dirname(os.path.abspath(path)):
            os.makedirs(directory, exist_ok=True)
        self.path = path
        self._lock = threading.Lock()

    def get_user_id(self) -> Optional[int]:
        with self._lock, shelve.open(self.path) as db:
            return db.get(self.KEY)

    def set_user_id(self, user_id: int) -> None:
        with self._lock, shelve.open(self.path) as db:
            db[self.KEY] = user_id

    def clear_user_id(self) -> None:
        with self._lock, shelve.open(self.path) as db:
            db.pop(self.KEY, None)
