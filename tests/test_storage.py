import os
import tempfile
import threading
import unittest

from woocommerce.storage import MemoryUserStorage, ShelveUserStorage


class StorageTests:
    """Checks shared by every :class:`~.UserStorage`"""

    def make_storage(self):
        raise NotImplementedError

    def test_empty(self):
        self.assertIsNone(self.make_storage().get_user_id())

    def test_set_and_clear(self):
        storage = self.make_storage()
        storage.set_user_id(25)
        self.assertEqual(storage.get_user_id(), 25)

        storage.set_user_id(26)
        self.assertEqual(storage.get_user_id(), 26)

        storage.clear_user_id()
        self.assertIsNone(storage.get_user_id())
        storage.clear_user_id()

    def test_concurrent_access(self):
        storage = self.make_storage()
        threads = [threading.Thread(target=storage.set_user_id, args=(i,)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertIn(storage.get_user_id(), range(10))


class TestMemoryUserStorage(StorageTests, unittest.TestCase):

    def make_storage(self):
        return MemoryUserStorage()

    def test_initial_value(self):
        self.assertEqual(MemoryUserStorage(user_id=7).get_user_id(), 7)


class TestShelveUserStorage(StorageTests, unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.path = os.path.join(self.temp_dir.name, 'session', 'user')

    def make_storage(self):
        return ShelveUserStorage(self.path)

    def test_directory_is_created(self):
        self.make_storage()
        self.assertTrue(os.path.isdir(os.path.dirname(self.path)))

    def test_survives_a_new_instance(self):
        self.make_storage().set_user_id(25)
        self.assertEqual(self.make_storage().get_user_id(), 25)


if __name__ == '__main__':
    unittest.main()
