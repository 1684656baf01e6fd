from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from a2a_tui.collectors import list_files  # noqa: E402
from a2a_tui.collectors.agents import collect as collect_agents  # noqa: E402
from a2a_tui.collectors.alerts import collect as collect_alerts  # noqa: E402
from a2a_tui.collectors.logs import collect as collect_logs  # noqa: E402
from a2a_tui.collectors.memory import collect as collect_memory  # noqa: E402
from a2a_tui.collectors.orchestrator import collect as collect_queue, queue_path  # noqa: E402


def write_card(root: Path, filename: str, payload) -> None:
    discovery = root / ".a2a" / "discovery"
    discovery.mkdir(parents=True, exist_ok=True)
    text = payload if isinstance(payload, str) else json.dumps(payload)
    (discovery / filename).write_text(text)


class AgentCollectorTests(unittest.TestCase):
    def test_missing_directory_is_absent(self):
        with tempfile.TemporaryDirectory() as tmp:
            result = collect_agents(Path(tmp))
            self.assertFalse(result.present)

    def test_malformed_cards_are_skipped_individually(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            write_card(root, "a.json", {"uuid": "1", "name": "Scout", "capabilities": ["search"]})
            write_card(root, "b.json", "{not json")
            write_card(root, "c.json", {"name": "no uuid"})
            write_card(root, "d.json", {"uuid": "4", "name": "Tester", "description": "runs tests"})
            write_card(root, "notes.txt", "ignored")
            result = collect_agents(root)
            self.assertTrue(result.present)
            self.assertEqual([c.name for c in result.value], ["Scout", "Tester"])
            self.assertEqual(result.value[0].capabilities, ["search"])
            self.assertEqual(result.value[1].description, "runs tests")
            self.assertEqual(len(result.errors), 2)

    def test_custom_a2a_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            discovery = root / ".agents" / "discovery"
            discovery.mkdir(parents=True)
            (discovery / "x.json").write_text(json.dumps({"uuid": "x", "name": "X"}))
            self.assertEqual(len(collect_agents(root, ".agents").value), 1)


class QueueCollectorTests(unittest.TestCase):
    def test_newest_first_and_bounded(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            path = queue_path(root)
            path.parent.mkdir(parents=True)
            path.write_text("\n".join(f'{{"cmd": {i}}}' for i in range(60)) + "\n")
            result = collect_queue(root)
            self.assertEqual(len(result.value), 50)
            self.assertEqual(result.value[0], '{"cmd": 59}')
            self.assertEqual(result.value[-1], '{"cmd": 10}')

    def test_blank_lines_are_commands_too(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            path = queue_path(root)
            path.parent.mkdir(parents=True)
            path.write_text("one\n\n   \ntwo\r\n")
            self.assertEqual(collect_queue(root).value, ["two", "   ", "", "one"])

    def test_sixty_lines_with_blanks_keep_exactly_fifty(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            path = queue_path(root)
            path.parent.mkdir(parents=True)
            lines = [f"cmd {i}" if i % 3 else "" for i in range(60)]
            path.write_text("\n".join(lines) + "\n")
            self.assertEqual(collect_queue(root).value, lines[10:][::-1])

    def test_missing_file_is_absent(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertFalse(collect_queue(Path(tmp)).present)


class LogCollectorTests(unittest.TestCase):
    def test_budget_spans_files_newest_first(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            log_dir = root / "logs"
            log_dir.mkdir()
            (log_dir / "old.log").write_text("\n".join(f"old {i}" for i in range(5)))
            (log_dir / "new.txt").write_text("\n".join(f"new {i}" for i in range(3)))
            os.utime(log_dir / "old.log", (1_000_000, 1_000_000))
            os.utime(log_dir / "new.txt", (2_000_000, 2_000_000))
            result = collect_logs(root, limit=5)
            self.assertEqual(result.value, ["old 3", "old 4", "new 0", "new 1", "new 2"])

    def test_undecodable_file_is_skipped(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            log_dir = root / "logs"
            log_dir.mkdir()
            (log_dir / "good.log").write_text("fine\n")
            (log_dir / "bad.bin").write_bytes(b"\xff\xfe\xfa\n")
            result = collect_logs(root)
            self.assertEqual(result.value, ["fine"])
            self.assertEqual(len(result.errors), 1)

    def test_only_newline_ends_a_line(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            log_dir = root / "logs"
            log_dir.mkdir()
            (log_dir / "app.log").write_bytes("form\x0cfeed\u2028sep\rmid\r\nnext\n".encode("utf-8"))
            result = collect_logs(root, limit=2)
            self.assertEqual(result.value, ["form\x0cfeed\u2028sep\rmid", "next"])

    def test_subdirectories_are_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "logs" / "archive").mkdir(parents=True)
            (root / "logs" / "a.log").write_text("x\n")
            self.assertEqual(collect_logs(root).value, ["x"])
            self.assertEqual([p.name for p in list_files(root / "logs")], ["a.log"])

    def test_missing_directory_is_absent(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertFalse(collect_logs(Path(tmp)).present)


class MemoryCollectorTests(unittest.TestCase):
    def _write(self, root: Path, text: str) -> None:
        (root / "var").mkdir(exist_ok=True)
        (root / "var" / "memory_metrics.json").write_text(text)

    def test_reads_used(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write(root, json.dumps({"used": 512, "total": 2048}))
            self.assertEqual(collect_memory(root).value, 512)

    def test_rejects_bad_payloads(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for text in ("{", "[]", "{}", '{"used": "12"}', '{"used": true}', '{"used": -1}'):
                self._write(root, text)
                self.assertFalse(collect_memory(root).present, text)

    def test_rejects_non_finite_used(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for text in ('{"used": NaN}', '{"used": Infinity}', '{"used": -Infinity}', '{"used": 1e999}'):
                self._write(root, text)
                self.assertFalse(collect_memory(root).present, text)


class AlertCollectorTests(unittest.TestCase):
    def _write(self, root: Path, payload) -> None:
        (root / "scripts").mkdir(exist_ok=True)
        (root / "scripts" / "semgrep-report.json").write_text(json.dumps(payload))

    def test_flat_list_with_bad_entry(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write(
                root,
                [
                    {"path": "a.js", "message": "eval", "severity": "ERROR"},
                    {"path": "b.js"},
                    {"path": "c.js", "message": "style", "severity": "note"},
                ],
            )
            result = collect_alerts(root)
            self.assertEqual([a.path for a in result.value], ["a.js", "c.js"])
            self.assertEqual(result.value[1].level, "INFO")
            self.assertEqual(len(result.errors), 1)

    def test_native_semgrep_results(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write(
                root,
                {"results": [{"path": "x.py", "extra": {"message": "sqli", "severity": "WARNING"}}]},
            )
            result = collect_alerts(root)
            self.assertEqual(result.value[0].message, "sqli")
            self.assertEqual(result.value[0].level, "WARNING")

    def test_object_without_results_is_absent(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self._write(root, {"errors": []})
            self.assertFalse(collect_alerts(root).present)


if __name__ == "__main__":
    unittest.main()
