import unittest

from returns_tracker.controllers.scan_input import ScanInputHelper


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestScanInputHelper(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.helper = ScanInputHelper(cooldown=2.0, clock=self.clock)

    def test_normalize_strips_control_characters(self):
        self.assertEqual(ScanInputHelper.normalize("\x02 1Z999AA1 \r\n"), "1Z999AA1")

    def test_empty_scan_is_rejected(self):
        self.assertIsNone(self.helper.accept("  \n"))

    def test_repeat_within_cooldown_is_ignored(self):
        self.assertEqual(self.helper.accept("ABC123"), "ABC123")
        self.clock.now += 1.5
        self.assertIsNone(self.helper.accept("ABC123"))

    def test_repeat_after_cooldown_is_accepted(self):
        self.helper.accept("ABC123")
        self.clock.now += 2.0
        self.assertEqual(self.helper.accept("ABC123"), "ABC123")

    def test_different_code_is_accepted_immediately(self):
        self.helper.accept("ABC123")
        self.assertEqual(self.helper.accept("XYZ789"), "XYZ789")

    def test_reset_forgets_last_code(self):
        self.helper.accept("ABC123")
        self.helper.reset()
        self.assertEqual(self.helper.accept("ABC123"), "ABC123")


if __name__ == "__main__":
    unittest.main()
