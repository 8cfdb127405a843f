"""Tests for the centralized logging setup."""

import logging
import os
import tempfile
import unittest

from avl_trees.logging_config import add_file_handler, get_logger, set_log_level, setup_logging


class TestLoggingConfig(unittest.TestCase):

    def setUp(self):
        self.project_logger = logging.getLogger("avl_trees")
        self.old_level = self.project_logger.level

    def tearDown(self):
        self.project_logger.setLevel(self.old_level)

    def test_get_logger_namespaces(self):
        self.assertEqual(get_logger("AVLTree").name, "avl_trees.AVLTree")
        self.assertEqual(get_logger("avl_trees.node").name, "avl_trees.node")
        self.assertFalse(self.project_logger.propagate)
        self.assertTrue(self.project_logger.hasHandlers())

    def test_setup_ignores_root_handlers(self):
        root = logging.getLogger()
        old_root_handlers = list(root.handlers)
        old_handlers = list(self.project_logger.handlers)
        old_propagate = self.project_logger.propagate
        for handler in old_handlers:
            self.project_logger.removeHandler(handler)
        self.project_logger.propagate = True
        try:
            logging.basicConfig()
            self.assertTrue(root.handlers)
            logger = setup_logging()
            self.assertIs(logger, self.project_logger)
            self.assertEqual(len(logger.handlers), 1)
            self.assertFalse(logger.propagate)
        finally:
            for handler in list(self.project_logger.handlers):
                self.project_logger.removeHandler(handler)
            for handler in old_handlers:
                self.project_logger.addHandler(handler)
            self.project_logger.propagate = old_propagate
            for handler in list(root.handlers):
                if handler not in old_root_handlers:
                    root.removeHandler(handler)

    def test_set_log_level(self):
        set_log_level(logging.WARNING)
        self.assertEqual(self.project_logger.level, logging.WARNING)
        self.assertFalse(get_logger("AVLTree").isEnabledFor(logging.INFO))

    def test_file_handler_receives_records(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "run.log")
            handler = add_file_handler(path, logging.INFO)
            try:
                get_logger("Stats").info("height table written")
                handler.flush()
            finally:
                self.project_logger.removeHandler(handler)
                handler.close()
            with open(path) as f:
                self.assertIn("height table written", f.read())


if __name__ == "__main__":
    unittest.main()
