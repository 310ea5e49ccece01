import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from lingua_core.identity import calc_source_key, calc_translation_key
from lingua_core.identity import cli


def _run(argv, env=None):
    buf = io.StringIO()
    with patch.dict("os.environ", env or {}, clear=True):
        with patch("sys.argv", ["lingua-keys", *argv]):
            with redirect_stdout(buf):
                cli.main()
    return buf.getvalue()


class IdentityCliTests(unittest.TestCase):
    def test_source_key_text_output(self):
        out = _run(["source-key", "--text", "Hello, world!", "--locale", "en_US"])
        self.assertEqual(out.strip(), calc_source_key("Hello, world!", "en-us"))

    def test_source_key_text_starting_with_dash(self):
        out = _run(["source-key", "--text=-5 items", "--locale", "en"])
        self.assertEqual(out.strip(), calc_source_key("-5 items", "en"))

    def test_source_key_from_file_keeps_line_endings_for_normalizer(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "source.txt"
            path.write_bytes("hello\r\nworld\r\n".encode("utf-8"))
            out = _run(["source-key", "--text-file", str(path), "--locale", "en"])
        self.assertEqual(out.strip(), calc_source_key("hello\nworld", "en"))

    def test_translation_key_json_output(self):
        source = calc_source_key("Hello", "en")
        out = _run(
            ["translation-key", "--source-hash", source, "--target-locale", "fr_FR", "--engine", "DeepL"],
            env={"LINGUA_OUTPUT_FORMAT": "json"},
        )
        payload = json.loads(out)
        self.assertEqual(payload, {"translation_key": calc_translation_key(source, "fr-fr", "deepl")})

    def test_identity_text_output(self):
        out = _run(
            [
                "identity",
                "--text",
                "Hello",
                "--source-locale",
                "en",
                "--target-locale",
                "es",
                "--engine",
                "libre-translate",
            ]
        )
        lines = dict(line.split(": ", 1) for line in out.strip().splitlines())
        source = calc_source_key("Hello", "en")
        self.assertEqual(lines["source_key"], source)
        self.assertEqual(lines["translation_key"], calc_translation_key(source, "es", "libre"))
        self.assertEqual(lines["engine"], "libre")

    def test_normalize_output(self):
        out = _run(
            ["normalize", "--locale", "PT_BR", "--engine", "LibreTranslate"],
            env={"LINGUA_OUTPUT_FORMAT": "json"},
        )
        self.assertEqual(json.loads(out), {"locale": "pt-br", "engine": "libre"})

    def test_missing_engine_exits_with_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                _run(["translation-key", "--source-hash", "abc", "--target-locale", "es", "--engine", "  "])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("Engine is required", err.getvalue())

    def test_invalid_config_exits_with_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                _run(["normalize", "--locale", "en"], env={"LINGUA_OUTPUT_FORMAT": "xml"})
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("LINGUA_OUTPUT_FORMAT", err.getvalue())

    def test_normalize_requires_an_option(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                _run(["normalize"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
