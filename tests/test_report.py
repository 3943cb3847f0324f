from blendsim.config import TankConfig
from blendsim.mix import Mix
from blendsim.report import format_state
from blendsim.state import State


def test_format_empty_state() -> None:
    s = State.create(TankConfig(num_tanks=2))
    lines = format_state(s).splitlines()

    assert lines[0] == f"State ID: {s.state_id}"
    assert lines[1:5] == ["Depth: 0", "Volume: 1", "Used Tanks: 0", "Total Wine: 0"]
    assert lines[5] == "Tank Contents:"
    assert lines[6:] == ["Tank 1: 0 -", "Tank 2: 0 -"]


def test_format_occupied_tank() -> None:
    s = State(TankConfig(num_tanks=2), (None, Mix.of(0.25, 0.0)))
    text = format_state(s)

    assert "Used Tanks: 1" in text
    assert "Total Wine: 0.25" in text
    assert "Tank 2: 0.25 (0.25, 0)" in text


def test_format_without_contents() -> None:
    s = State.create(TankConfig(num_tanks=3))
    text = format_state(s, contents=False)
    assert "Tank Contents:" not in text
    assert len(text.splitlines()) == 5
