#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import Logger, Log, LogLevel, CodingProgressStep, CodeAssignmentLog

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123) 

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")

    def test_info_not_displayed_by_default(self):
        self.logger.log(CodeAssignmentLog('a', '0', 3))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is a warning", self.captured_output.getvalue())

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)
        self.assertIn("This is an error", self.captured_output.getvalue())

    def test_progress_interval(self):
        self.logger.coding_step_interval_count = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        self.assertEqual(self.logger.coding_progress_count, 4)
        self.assertEqual(len(self.logger.logs), 0)
        printed = self.captured_output.getvalue()
        self.assertIn("Encoding symbols (2/4)", printed)
        self.assertIn("Encoding symbols (4/4)", printed)
        self.assertNotIn("(1/4)", printed)

    def test_save(self):
        self.logger.log(Log("InfoTest", LogLevel.INFO, "kept"))
        self.logger.log(Log("WarningTest", LogLevel.WARNING, "dropped"))
        self.logger.save_warning = False
        with tempfile.TemporaryDirectory() as folder:
            path = os.path.join(folder, "log.txt")
            self.logger.save(path)
            with open(path) as file:
                content = file.read()
        self.assertIn("kept", content)
        self.assertNotIn("dropped", content)

if __name__ == '__main__':
    unittest.main()
