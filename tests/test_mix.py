import math
import sys

import numpy as np
import pytest

from blendsim.mix import Mix


MIXES = [
    Mix.of(0.0),
    Mix.of(1.0),
    Mix.of(0.3, 0.7),
    Mix.of(0.25, 0.0, 0.5),
    Mix.of(1e-3, 2.0, 0.0, 4.5),
]


class TestMixConstruction:
    def test_sum_and_length(self) -> None:
        m = Mix.of(3.0, 4.0)
        assert m.sum == pytest.approx(7.0)
        assert m.length == pytest.approx(5.0)
        assert m.count == 2
        assert len(m) == 2

    def test_from_index_is_one_hot(self) -> None:
        m = Mix.from_index(2, 4)
        assert list(m) == [0.0, 0.0, 1.0, 0.0]
        assert m.sum == pytest.approx(1.0)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_from_index_out_of_range(self, index: int) -> None:
        with pytest.raises(ValueError):
            Mix.from_index(index, 4)

    def test_from_list_and_array(self) -> None:
        assert Mix([0.1, 0.2]) == Mix(np.array([0.1, 0.2]))

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            Mix.of(1.0, math.nan)

    def test_rejects_2d(self) -> None:
        with pytest.raises(ValueError, match="one-dimensional"):
            Mix(np.zeros((2, 2)))

    def test_values_are_read_only(self) -> None:
        m = Mix.of(1.0, 2.0)
        with pytest.raises(ValueError):
            m.values[0] = 5.0

    def test_does_not_alias_source_array(self) -> None:
        src = np.array([1.0, 2.0])
        m = Mix(src)
        src[0] = 9.0
        assert m[0] == 1.0


class TestMixAlgebra:
    def test_add_subtract_scale(self) -> None:
        a = Mix.of(0.2, 0.3)
        b = Mix.of(0.1, 0.4)
        assert (a + b).isclose(Mix.of(0.3, 0.7))
        assert (a - b).isclose(Mix.of(0.1, -0.1))
        assert (a * 2.0).isclose(Mix.of(0.4, 0.6))
        assert (2.0 * a).isclose(Mix.of(0.4, 0.6))
        assert (a / 2.0).isclose(Mix.of(0.1, 0.15))

    def test_operations_return_new_mix(self) -> None:
        a = Mix.of(0.2, 0.3)
        b = a + Mix.of(0.0, 0.0)
        assert b is not a
        assert list(a) == [0.2, 0.3]

    @pytest.mark.parametrize("op", ["add", "subtract", "lerp"])
    def test_length_mismatch_raises(self, op: str) -> None:
        with pytest.raises(ValueError, match="length mismatch"):
            getattr(Mix.of(1.0), op)(Mix.of(1.0, 2.0))

    @pytest.mark.parametrize("m", MIXES)
    def test_distance_to_self_is_zero(self, m: Mix) -> None:
        assert m.distance(m) == 0.0
        assert m.length >= 0.0

    @pytest.mark.parametrize("a,b", [(MIXES[2], Mix.of(0.9, 0.1)), (MIXES[3], Mix.of(0.0, 1.0, 0.25))])
    def test_add_inverts_subtract(self, a: Mix, b: Mix) -> None:
        assert a.add(b.subtract(a)).isclose(b)

    def test_distance(self) -> None:
        assert Mix.of(0.0, 0.0).distance(Mix.of(3.0, 4.0)) == pytest.approx(5.0)

    def test_distance_to_missing_mix_is_max(self) -> None:
        assert Mix.of(1.0).distance(None) == sys.float_info.max
        assert Mix.of(1.0).distance_of_normals(None) == sys.float_info.max

    @pytest.mark.parametrize("m", [m for m in MIXES if m.length > 1e-12])
    def test_normal_has_unit_length(self, m: Mix) -> None:
        assert m.normal.length == pytest.approx(1.0)

    def test_normal_of_zero_is_unchanged(self) -> None:
        z = Mix.zeros(3)
        assert z.normal is z
        tiny = Mix.of(1e-14, 0.0)
        assert tiny.normal is tiny

    def test_distance_of_normals_ignores_volume(self) -> None:
        a = Mix.of(0.1, 0.1)
        b = Mix.of(0.5, 0.5)
        assert a.distance_of_normals(b) == pytest.approx(0.0)
        assert Mix.of(1.0, 0.0).distance_of_normals(Mix.of(0.0, 2.0)) == pytest.approx(math.sqrt(2.0))

    @pytest.mark.parametrize("a,b", [(MIXES[2], Mix.of(0.9, 0.1)), (MIXES[3], Mix.of(0.0, 1.0, 0.25))])
    def test_lerp_endpoints(self, a: Mix, b: Mix) -> None:
        assert a.lerp(b, 0.0).isclose(a)
        assert a.lerp(b, 1.0).isclose(b)

    def test_lerp_default_is_midpoint(self) -> None:
        assert Mix.of(0.0, 1.0).lerp(Mix.of(1.0, 0.0)).isclose(Mix.of(0.5, 0.5))

    def test_count_used_wines(self) -> None:
        # Неположительные компоненты считаются неиспользованными.
        assert Mix.of(0.5, 0.0, -0.1, 0.2).count_used_wines() == 2
        assert Mix.zeros(4).count_used_wines() == 0


class TestMixValueSemantics:
    def test_equal_mixes_hash_equal(self) -> None:
        assert Mix.of(0.0, 1.0) == Mix.of(-0.0, 1.0)
        assert hash(Mix.of(0.0, 1.0)) == hash(Mix.of(-0.0, 1.0))

    def test_not_equal_to_other_types(self) -> None:
        assert Mix.of(1.0) != 1.0
        assert Mix.of(1.0) != Mix.of(1.0, 0.0)

    def test_isclose_tolerance(self) -> None:
        assert Mix.of(0.25).isclose(Mix.of(0.25 + 1e-12))
        assert not Mix.of(0.25).isclose(Mix.of(0.26))

    def test_str(self) -> None:
        assert str(Mix.of(0.5, 0.25, 1.0)) == "(0.5, 0.25, 1)"
        assert str(Mix.of(1.0 / 3.0)) == "(0.333)"
