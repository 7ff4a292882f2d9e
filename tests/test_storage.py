# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import shutil
import tempfile
import unittest
from datetime import date, datetime
from pathlib import Path

from weightcut.errors import ConfigurationError
from weightcut.protocol.models import Protocol
from weightcut.tracking.models import DailyTracking, LogType, Profile, StateSnapshot, WeightLog
from weightcut.tracking.storage import JsonSnapshotStore


class TestJsonSnapshotStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="weightcut-test-"))
        self.store = JsonSnapshotStore(self._tmp / "nested" / "snapshot.json")

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_missing_file_loads_fresh_snapshot(self) -> None:
        snapshot = self.store.load()
        self.assertEqual(snapshot.logs, [])
        self.assertIs(snapshot.profile.protocol, Protocol.OPTIMAL_CUT)

    def test_save_then_load(self) -> None:
        snapshot = StateSnapshot(
            profile=Profile(
                target_weight_class=150.0,
                weigh_in_at=datetime(2026, 3, 14, 7, 0),
                protocol=Protocol.SPAR_COMPETITION,
            ),
            logs=[WeightLog(date=datetime(2026, 3, 10, 7), type=LogType.morning, weight=158.2)],
            daily_tracking={date(2026, 3, 10): DailyTracking(day=date(2026, 3, 10), protein_g=120)},
            dismissed_switches=["1:6"],
            fired_events={date(2026, 3, 10): ["first-log-2026-03-10"]},
        )
        path = self.store.save(snapshot)
        self.assertTrue(path.exists())
        self.assertFalse(path.with_name(path.name + ".tmp").exists())
        self.assertEqual(self.store.load(), snapshot)

    def test_protocol_is_stored_as_tag(self) -> None:
        self.store.save(StateSnapshot(profile=Profile(protocol=Protocol.RAPID_CUT)))
        raw = json.loads(self.store.path.read_text(encoding="utf-8"))
        self.assertEqual(raw["profile"]["protocol"], "2")

    def test_invalid_file_raises(self) -> None:
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text('{"logs": [{"date": "x"}]}', encoding="utf-8")
        with self.assertRaises(ConfigurationError):
            self.store.load()

    def test_unsupported_version_raises(self) -> None:
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text(json.dumps({"version": 99}), encoding="utf-8")
        with self.assertRaises(ConfigurationError):
            self.store.load()


if __name__ == "__main__":
    unittest.main()
