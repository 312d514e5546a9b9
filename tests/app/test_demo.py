# tests/app/test_demo.py
import io
import os
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from ride_share.app.build import build
from ride_share.app.demo import DEMO_SCENARIO, main, run
from ride_share.domain.errors import DuplicateRideIdError, InvalidRatingError
from ride_share.io.recorder import MemorySink, Recorder

RULE = "--------------------"


def _block(rid, pickup, dropoff, miles, fare):
    return [
        f"Ride ID: {rid}",
        f"  Pickup: {pickup}",
        f"  Dropoff: {dropoff}",
        f"  Distance: {miles} miles",
        f"  Fare: ${fare}",
    ]


def _expected_lines():
    s1 = ("Downtown", "Suburb A", "10.5", "21.00")
    p2 = ("Airport", "City Center", "25.0", "92.50")
    s3 = ("Park", "Museum", "3.2", "6.40")
    # banner comes from ScenarioModel.title; its default deliberately names no
    # implementation language, so this first line is the one line that differs
    # from the legacy console banner
    lines = ["--- Ride Sharing System Demonstration ---"]
    for rid, trip in (("S001", s1), ("P002", p2), ("S003", s3)):
        lines += ["", "Sandesh Shrestha requested a ride.", *_block(rid, *trip)]
    lines += [
        "",
        "--- Driver Details ---",
        "Driver ID: D001",
        "Name: Alice Smith",
        "Rating: 4.8/5.0",
        "Completed Rides (3):",
    ]
    for rid, trip in (("S001-C", s1), ("P002-C", p2), ("S003-C", s3)):
        lines += [*_block(rid, *trip), RULE]
    lines += ["", "--- Sandesh Shrestha's Ride History ---"]
    for rid, trip in (("S001", s1), ("P002", p2), ("S003", s3)):
        lines += [*_block(rid, *trip), RULE]
    lines += ["", "--- Polymorphism Demonstration (List of All Rides in System) ---"]
    for block in (
        _block("SysR01", "Library", "Cafe", "7.0", "14.00"),
        _block("SysR02", "Mall", "Home", "4.5", "20.75"),
        _block("SysR03", "Gym", "Cafe", "2.0", "4.00"),
        _block("SysR04", "School", "Park", "12.0", "47.00"),
    ):
        lines += [*block, RULE]
    lines += ["", "--- Demonstration Complete ---"]
    return lines


def test_demo_output():
    buf = io.StringIO()
    app = build(DEMO_SCENARIO, fp=buf, use_logging=False)
    run(app, buf)
    assert buf.getvalue().splitlines() == _expected_lines()


def test_main_prints_to_stdout(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == _expected_lines()


def test_demo_moves_each_ride_once():
    app = build(DEMO_SCENARIO, fp=io.StringIO(), use_logging=False)
    run(app, io.StringIO())
    (rider,) = app.riders
    (driver,) = app.drivers
    assert [r.id for r in rider.history] == ["S001", "P002", "S003"]
    assert [r.id for r in driver.history] == ["S001-C", "P002-C", "S003-C"]
    assert not set(map(id, rider.history)) & set(map(id, driver.history))
    assert driver.fare_summary().total == pytest.approx(21.0 + 92.5 + 6.4)


def test_recorder_sees_every_transfer():
    sink = MemorySink()
    app = build(DEMO_SCENARIO, fp=io.StringIO(), recorder=Recorder(sink))
    run(app, io.StringIO())
    assert [e.name for e in sink.events] == ["RideRequested"] * 3 + ["RideCompleted"] * 3
    assert [e.seq for e in sink.events] == list(range(1, 7))


def test_strict_demo_is_clean():
    cfg = {**DEMO_SCENARIO, "validation": {"strict": True}}
    app = build(cfg, fp=io.StringIO(), use_logging=False)
    assert len(app.system_rides) == 4


def test_strict_rejects_duplicate_ids_across_owners():
    cfg = {
        "name": "dup",
        "validation": {"strict": True},
        "riders": [{"id": "R1", "name": "A", "requested": [
            {"kind": "standard", "id": "X", "pickup": "a", "dropoff": "b", "distance_miles": 1.0}
        ]}],
        "system_rides": [
            {"kind": "premium", "id": "X", "pickup": "a", "dropoff": "b", "distance_miles": 1.0}
        ],
    }
    with pytest.raises(DuplicateRideIdError):
        build(cfg, use_logging=False)
    # lenient mode keeps the reference behavior
    build({**cfg, "validation": {"strict": False}}, use_logging=False)


def test_strict_rejects_bad_rating():
    cfg = {"name": "r", "validation": {"strict": True}, "drivers": [{"id": "D", "name": "B", "rating": 7.0}]}
    with pytest.raises(InvalidRatingError):
        build(cfg, use_logging=False)


def test_config_is_checked_structurally():
    with pytest.raises(ValidationError):
        build({"name": "x", "system_rides": [{"kind": "luxury", "id": "L", "pickup": "a",
                                              "dropoff": "b", "distance_miles": 1.0}]})
    with pytest.raises(ValidationError):
        build({"name": "x", "surge": 2.0})


def test_empty_scenario_runs():
    buf = io.StringIO()
    run(build({"name": "empty", "title": "Nothing Here"}, fp=buf, use_logging=False), buf)
    assert buf.getvalue().splitlines()[0] == "--- Nothing Here ---"
    assert buf.getvalue().endswith("\n--- Demonstration Complete ---\n")


def test_module_entry_point():
    src = Path(__file__).resolve().parents[2] / "src"
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(src), os.environ.get("PYTHONPATH")]))}
    proc = subprocess.run(
        [sys.executable, "-m", "ride_share"], capture_output=True, text=True, check=False, env=env
    )
    assert proc.returncode == 0
    assert proc.stdout.splitlines() == _expected_lines()
    assert proc.stderr == ""
