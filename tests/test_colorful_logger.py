import logging
import threading
import unittest
from unittest.mock import MagicMock, patch

from colorful_logger import (
    AnsiColorBackground,
    AnsiColorText,
    ColorfulLogger,
    PreconditionError,
    UninitializedAccessError,
    current,
    get_instance,
    is_initialized,
    resolve,
)
from colorful_logger import registry

RESET = "\u001b[0m"


class TestColorfulLoggerEmit(unittest.TestCase):
    """Test message composition and the enabled gate"""

    def setUp(self):
        self.sink = MagicMock(spec=logging.Logger)
        self.logger = ColorfulLogger("demo", sink=self.sink)

    def emitted(self):
        """Return the single line handed to the sink"""
        self.sink.info.assert_called_once()
        fmt, line = self.sink.info.call_args[0]
        self.assertEqual(fmt, "%s")
        return line

    def test_plain_message_is_verbatim(self):
        """Test that a message without colors gets no escape codes"""
        self.logger.info("hello world")
        self.assertEqual(self.emitted(), "hello world")

    def test_foreground_wraps_message(self):
        """Test fg + message + reset for every foreground color"""
        for color in AnsiColorText:
            self.sink.reset_mock()
            self.logger.info("message", color)
            line = self.emitted()
            self.assertTrue(line.startswith(color.value))
            self.assertTrue(line.endswith(RESET))
            self.assertEqual(line[len(color.value) : -len(RESET)], "message")

    def test_foreground_and_background_order(self):
        """Test that the foreground code precedes the background code"""
        for color in AnsiColorText:
            for background in AnsiColorBackground:
                line = self.logger.colorize("x", color, background)
                self.assertEqual(line, color.value + background.value + "x" + RESET)

    def test_info_with_background(self):
        """Test a single emitted line with both colors"""
        self.logger.info("msg", AnsiColorText.CYAN, AnsiColorBackground.BLACK_BACK)
        self.assertEqual(self.emitted(), "\u001b[36m\u001b[40mmsg\u001b[0m")

    def test_percent_in_message_is_not_formatted(self):
        """Test that '%' reaches the sink unchanged"""
        real_sink = logging.getLogger("colorful_logger.tests.percent")
        logger = ColorfulLogger("percent", sink=real_sink)
        with self.assertLogs(real_sink, level="INFO") as captured:
            logger.info("100% done %s", AnsiColorText.GREEN)
        self.assertEqual(captured.records[0].getMessage(), "\u001b[32m100% done %s\u001b[0m")

    def test_emits_at_info_level(self):
        """Test that the sink receives INFO records"""
        real_sink = logging.getLogger("colorful_logger.tests.level")
        logger = ColorfulLogger("level", sink=real_sink)
        with self.assertLogs(real_sink, level="DEBUG") as captured:
            logger.info("one")
        self.assertEqual(len(captured.records), 1)
        self.assertEqual(captured.records[0].levelno, logging.INFO)

    def test_disabled_writes_nothing(self):
        """Test that no overload touches the sink while disabled"""
        self.logger.set_enabled(False)
        self.logger.info("a")
        self.logger.info("b", AnsiColorText.RED)
        self.logger.info("c", AnsiColorText.RED, AnsiColorBackground.WHITE_BACK)
        self.sink.info.assert_not_called()

    def test_reenable_restores_output(self):
        """Test that set_enabled(True) takes effect immediately"""
        self.logger.set_enabled(False)
        self.logger.info("skipped")
        self.logger.set_enabled(True)
        self.logger.info("shown")
        self.assertEqual(self.emitted(), "shown")

    def test_enabled_property_and_accessors_agree(self):
        """Test the enabled property against is_enabled/set_enabled"""
        self.assertTrue(self.logger.enabled)
        self.logger.enabled = False
        self.assertFalse(self.logger.is_enabled())
        self.logger.set_enabled(True)
        self.assertTrue(self.logger.enabled)

    def test_initially_disabled(self):
        """Test constructing a logger that starts disabled"""
        logger = ColorfulLogger("quiet", enabled=False, sink=self.sink)
        logger.info("nothing")
        self.sink.info.assert_not_called()

    def test_none_message_rejected(self):
        """Test that a None message raises before anything is written"""
        with self.assertRaises(PreconditionError):
            self.logger.info(None, AnsiColorText.RED)  # type: ignore[arg-type]
        self.sink.info.assert_not_called()

    def test_background_without_foreground_rejected(self):
        """Test that a lone background color is a precondition failure"""
        with self.assertRaises(PreconditionError):
            self.logger.info("msg", None, AnsiColorBackground.RED_BACK)
        self.sink.info.assert_not_called()

    def test_default_sink_is_named_logger(self):
        """Test that the sink defaults to logging.getLogger(name)"""
        logger = ColorfulLogger("colorful_logger.tests.default")
        self.assertIs(logger.sink, logging.getLogger("colorful_logger.tests.default"))
        self.assertEqual(logger.name, "colorful_logger.tests.default")

    def test_invalid_name_rejected(self):
        """Test that None and empty names are rejected"""
        for name in (None, ""):
            with self.assertRaises(PreconditionError):
                ColorfulLogger(name)  # type: ignore[arg-type]


class TestRegistry(unittest.TestCase):
    """Test the shared logger lifecycle"""

    def setUp(self):
        registry._clear_instance()

    def tearDown(self):
        registry._clear_instance()

    def test_current_before_initialize_fails(self):
        """Test that current() raises when nothing was created"""
        self.assertFalse(is_initialized())
        with self.assertRaises(UninitializedAccessError) as ctx:
            current()
        self.assertIn("ColorfulLogger", str(ctx.exception))

    def test_initialize_then_current(self):
        """Test that current() returns the created instance"""
        logger = get_instance("demo", True)
        self.assertTrue(is_initialized())
        self.assertIs(current(), logger)
        self.assertEqual(logger.name, "demo")
        self.assertTrue(logger.enabled)

    def test_default_enabled_is_true(self):
        """Test get_instance(name) creates an enabled logger"""
        self.assertTrue(get_instance("demo").enabled)

    def test_first_writer_wins(self):
        """Test that later calls ignore their name and flag"""
        first = get_instance("first", True)
        second = get_instance("second", False)
        self.assertIs(first, second)
        self.assertEqual(second.name, "first")
        self.assertTrue(second.enabled)

    def test_failed_initialize_leaves_registry_empty(self):
        """Test that a rejected name does not occupy the slot"""
        with self.assertRaises(PreconditionError):
            get_instance(None)  # type: ignore[arg-type]
        self.assertFalse(is_initialized())
        logger = get_instance("recovered")
        self.assertEqual(logger.name, "recovered")

    def test_resolve_prefers_explicit_logger(self):
        """Test that resolve() returns a passed logger even when a shared one exists"""
        shared = get_instance("shared")
        explicit = ColorfulLogger("explicit", sink=MagicMock(spec=logging.Logger))
        self.assertIs(resolve(explicit), explicit)
        self.assertIs(resolve(None), shared)
        self.assertIs(resolve(), shared)

    def test_resolve_without_shared_logger_fails(self):
        """Test that resolve() with no logger propagates UninitializedAccessError"""
        with self.assertRaises(UninitializedAccessError):
            resolve()

    def test_concurrent_initialize_builds_one_instance(self):
        """Test that racing first calls construct exactly one logger"""
        callers = 16
        barrier = threading.Barrier(callers)
        results = []
        results_lock = threading.Lock()

        def worker(index):
            barrier.wait()
            logger = get_instance(f"worker-{index}")
            with results_lock:
                results.append(logger)

        with patch("colorful_logger.registry.ColorfulLogger", wraps=ColorfulLogger) as ctor:
            threads = [threading.Thread(target=worker, args=(i,)) for i in range(callers)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(ctor.call_count, 1)
        self.assertEqual(len(results), callers)
        for logger in results:
            self.assertIs(logger, current())


if __name__ == "__main__":
    unittest.main()
