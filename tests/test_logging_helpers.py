from __future__ import annotations

import io
import json
import logging
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

import xbparams  # noqa: E402
from xbparams.logging.helpers import (  # noqa: E402
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    resolve_level,
    setup_base_logger,
    trace_io,
)
from xbparams.logging.factory import DefaultLoggerFactory  # noqa: E402
from xbparams.runtime.settings import ParserSettings  # noqa: E402


class LoggingHelperTests(unittest.TestCase):
    def test_get_logger_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "xbparams")
        self.assertEqual(get_logger("response").name, "xbparams.response")
        self.assertEqual(get_logger("xbparams.directives").name, "xbparams.directives")
        self.assertEqual(get_logger("xbparamsish").name, "xbparams.xbparamsish")

    def test_json_formatter_payload(self) -> None:
        record = logging.LogRecord("xbparams.response", logging.INFO, __file__, 1, "loaded %s", ("a.rsp",), None)
        record.context = {"path": "a.rsp"}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["msg"], "loaded a.rsp")
        self.assertEqual(payload["module"], "xbparams.response")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["version"], xbparams.__version__)
        self.assertEqual(payload["ctx"], {"path": "a.rsp"})
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" Info "), logging.INFO)
        self.assertEqual(resolve_level(None), logging.WARNING)
        self.assertEqual(resolve_level("nonsense", logging.ERROR), logging.ERROR)

    def test_trace_io_gated_by_env(self) -> None:
        lg = get_logger("tests.trace")
        with patch.dict(os.environ, {"XBPARAMS_TRACE_IO": "0"}):
            self.assertFalse(is_trace_io_enabled())
            with patch.object(lg, "debug") as dbg:
                trace_io(lg, "reading", path="x")
            dbg.assert_not_called()
        with patch.dict(os.environ, {"XBPARAMS_TRACE_IO": "1"}):
            with self.assertLogs("xbparams.tests.trace", level="DEBUG") as cm:
                trace_io(lg, "reading", path="x")
        self.assertIn("reading", cm.output[0])


class BaseLoggerSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.base = logging.getLogger("xbparams")
        self._saved = (list(self.base.handlers), self.base.level, self.base.propagate)
        self.base.handlers = []

    def tearDown(self) -> None:
        handlers, level, propagate = self._saved
        self.base.handlers = handlers
        self.base.setLevel(level)
        self.base.propagate = propagate

    def test_switching_to_json_replaces_formatter(self) -> None:
        stream = io.StringIO()
        setup_base_logger(json_logs=False, stream=stream)
        setup_base_logger(json_logs=True, level=logging.INFO, stream=stream)
        self.assertEqual(len(self.base.handlers), 1)
        self.assertIsInstance(self.base.handlers[0].formatter, JsonLogFormatter)
        self.assertEqual(self.base.level, logging.INFO)

        get_logger("response").info("loaded %s", "a.rsp")
        self.assertEqual(json.loads(stream.getvalue())["msg"], "loaded a.rsp")

    def test_switching_back_to_plain_text(self) -> None:
        stream = io.StringIO()
        setup_base_logger(json_logs=True, stream=stream)
        setup_base_logger(json_logs=False, stream=stream)
        self.assertNotIsInstance(self.base.handlers[0].formatter, JsonLogFormatter)
        get_logger("response").warning("plain")
        self.assertEqual(stream.getvalue(), "WARNING: plain\n")

    def test_foreign_handlers_are_kept(self) -> None:
        foreign = logging.NullHandler()
        self.base.addHandler(foreign)
        setup_base_logger(json_logs=True, stream=io.StringIO())
        self.assertIn(foreign, self.base.handlers)
        self.assertIsNone(foreign.formatter)
        self.assertEqual(len(self.base.handlers), 2)


class LoggerFactoryTests(unittest.TestCase):
    def test_from_env(self) -> None:
        factory = DefaultLoggerFactory.from_env({"XBPARAMS_JSON_LOGS": "1", "XBPARAMS_LOG_LEVEL": "debug"})
        self.assertTrue(factory.json_logs)
        self.assertEqual(factory.level, logging.DEBUG)

    def test_from_env_defaults(self) -> None:
        factory = DefaultLoggerFactory.from_env({})
        self.assertFalse(factory.json_logs)
        self.assertEqual(factory.level, logging.WARNING)

    def test_returns_namespaced_logger(self) -> None:
        self.assertEqual(DefaultLoggerFactory().get_logger("cli").name, "xbparams.cli")


class SettingsTests(unittest.TestCase):
    def test_from_env(self) -> None:
        s = ParserSettings.from_env({"XBPARAMS_BIN_PATH": "/opt/xb/bin", "XBPARAMS_CWD": "/src"})
        self.assertEqual(s.bin_path, Path("/opt/xb/bin"))
        self.assertEqual(s.cwd, Path("/src"))
        self.assertEqual(s.default_response_file, Path("/opt/xb/bin/xbuild.rsp"))

    def test_defaults(self) -> None:
        s = ParserSettings.from_env({})
        self.assertEqual(s.cwd, Path.cwd())
        self.assertEqual(s.project_pattern, "*.??proj")
        self.assertTrue(s.sort_candidates)


if __name__ == "__main__":
    unittest.main()
