import unittest

from drivenodes.util.kinds import (
    KIND_ASSET,
    KIND_FILE,
    KIND_FOLDER,
    STATUS_AVAILABLE,
    STATUS_TRASH,
    is_available,
    is_file,
    is_folder,
)


class TestUtilKinds(unittest.TestCase):
    def test_kinds(self) -> None:
        self.assertTrue(is_file(KIND_FILE))
        self.assertTrue(is_folder(KIND_FOLDER))
        self.assertFalse(is_file(KIND_ASSET))
        self.assertFalse(is_folder(KIND_ASSET))
        self.assertFalse(is_file("file"))

    def test_status(self) -> None:
        self.assertTrue(is_available(STATUS_AVAILABLE))
        self.assertFalse(is_available(STATUS_TRASH))
        self.assertFalse(is_available(""))


if __name__ == "__main__":
    unittest.main()
