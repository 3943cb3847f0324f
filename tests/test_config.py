import pytest

from blendsim.config import DEFAULT_TANK_CONFIG, TankConfig


class TestTankConfig:
    def test_tank_size(self) -> None:
        cfg = TankConfig(num_tanks=4)
        assert cfg.tank_size == pytest.approx(0.25)
        assert cfg.total_capacity == pytest.approx(1.0)

    def test_default(self) -> None:
        assert DEFAULT_TANK_CONFIG.num_tanks == 4
        assert DEFAULT_TANK_CONFIG.adjacency == "neighbor"
        assert DEFAULT_TANK_CONFIG.max_gap == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_tanks": 0},
            {"num_tanks": -2},
            {"num_tanks": 2.5},
            {"num_tanks": True},
            {"num_tanks": "4"},
            {"num_tanks": 3, "adjacency": "ring"},
            {"num_tanks": 3, "max_gap": 0},
            {"num_tanks": 3, "volume_tol": 0.0},
            {"num_tanks": 3, "adjacency": "explicit"},
            {"num_tanks": 3, "adjacency": "explicit", "links": {0: [3]}},
        ],
    )
    def test_invariants(self, kwargs) -> None:
        with pytest.raises(ValueError):
            TankConfig(**kwargs)

    def test_links_are_normalized_and_hashable(self) -> None:
        cfg = TankConfig(num_tanks=4, adjacency="explicit", links={2: [3, 1, 3], 0: (1,)})
        assert cfg.links == ((0, (1,)), (2, (1, 3)))
        assert cfg.linked(2) == (1, 3)
        assert cfg.linked(1) == ()
        assert hash(cfg) == hash(TankConfig(num_tanks=4, adjacency="explicit", links={0: [1], 2: [1, 3]}))

    def test_frozen(self) -> None:
        cfg = TankConfig(num_tanks=2)
        with pytest.raises(AttributeError):
            cfg.num_tanks = 3  # type: ignore[misc]
