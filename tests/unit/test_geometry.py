"""
Тесты для Geometry — пеленги и расстояние пары антенн

Система отсчёта: 0° по оси +Y, угол растёт по часовой стрелке.
"""

import pytest

from src.core.math.geometry import (
    PairwiseGeometry,
    bearing_forward,
    compute_pairwise_geometry,
    reverse_bearing,
)


# =============================================================================
# ТЕСТЫ: bearing_forward
# =============================================================================


class TestBearingForward:
    """Тесты для bearing_forward"""

    @pytest.mark.parametrize(
        "dx, dy, expected",
        [
            (0, -100, 0),  # антенна 2 по +Y
            (-100, 0, 90),  # антенна 2 по +X
            (0, 100, 180),  # антенна 2 по -Y
            (100, 0, 270),  # антенна 2 по -X
        ],
    )
    def test_axis_bearings(self, dx: int, dy: int, expected: int) -> None:
        """Пеленги вдоль осей"""
        assert bearing_forward(dx, dy) == expected

    def test_zero_delta_is_zero(self) -> None:
        """Совпадающие позиции → 0"""
        assert bearing_forward(0, 0) == 0

    def test_result_is_integer_in_range(self) -> None:
        """Результат всегда целый и в [0, 360)"""
        for dx in range(-50, 51, 7):
            for dy in range(-50, 51, 7):
                bearing = bearing_forward(dx, dy)
                assert isinstance(bearing, int)
                assert 0 <= bearing < 360

    def test_fraction_truncated(self) -> None:
        """Дробная часть угла отбрасывается"""
        # atan2(-1, -100) → 180 + 0.5729... → 0 (усечение, не округление)
        assert bearing_forward(-1, -100) == 0
        # atan2(1, -100) → 360 - 0.5729... → 359
        assert bearing_forward(1, -100) == 359


class TestReverseBearing:
    """Тесты для reverse_bearing"""

    def test_reverse(self) -> None:
        """Обратный пеленг"""
        assert reverse_bearing(0) == 180
        assert reverse_bearing(90) == 270
        assert reverse_bearing(180) == 0
        assert reverse_bearing(359) == 179

    def test_double_reverse_is_identity(self) -> None:
        """Двойной разворот возвращает исходный пеленг"""
        for bearing in range(0, 360):
            assert reverse_bearing(reverse_bearing(bearing)) == bearing


# =============================================================================
# ТЕСТЫ: compute_pairwise_geometry
# =============================================================================


class TestComputePairwiseGeometry:
    """Тесты для compute_pairwise_geometry"""

    def test_north_pair(self) -> None:
        """Антенна 2 на 100 единиц по +Y"""
        geometry = compute_pairwise_geometry(0, 0, 0, 100)

        assert geometry == PairwiseGeometry(
            dx=0, dy=-100, distance=100.0, bearing_forward=0, bearing_reverse=180
        )
        assert not geometry.is_colocated

    def test_east_pair(self) -> None:
        """Антенна 2 на 100 единиц по +X"""
        geometry = compute_pairwise_geometry(0, 0, 100, 0)

        assert geometry.bearing_forward == 90
        assert geometry.bearing_reverse == 270

    def test_deltas_are_p1_minus_p2(self) -> None:
        """Дельты считаются как P1 - P2"""
        geometry = compute_pairwise_geometry(10, 20, 3, 4)

        assert geometry.dx == 7
        assert geometry.dy == 16

    def test_euclidean_distance(self) -> None:
        """Евклидово расстояние"""
        assert compute_pairwise_geometry(3, 4, 0, 0).distance == 5.0
        assert compute_pairwise_geometry(0, 0, -3000, 4000).distance == 5000.0

    def test_colocated(self) -> None:
        """Совпадающие позиции: distance 0, пеленги 0/180"""
        geometry = compute_pairwise_geometry(5, 5, 5, 5)

        assert geometry.distance == 0
        assert geometry.bearing_forward == 0
        assert geometry.bearing_reverse == 180
        assert geometry.is_colocated

    def test_translation_invariant(self) -> None:
        """Сдвиг обеих позиций не меняет геометрию"""
        base = compute_pairwise_geometry(0, 0, 0, 100)
        shifted = compute_pairwise_geometry(10, -20, 10, 80)

        assert shifted == base

    def test_swapped_positions_reverse_bearing(self) -> None:
        """Перестановка антенн меняет местами прямой и обратный пеленг"""
        forward = compute_pairwise_geometry(0, 0, 100, 0)
        backward = compute_pairwise_geometry(100, 0, 0, 0)

        assert backward.bearing_forward == forward.bearing_reverse
        assert backward.bearing_reverse == forward.bearing_forward

    def test_nan_coordinate_rejected(self) -> None:
        """NaN координата отвергается"""
        with pytest.raises(ValueError, match="x1"):
            compute_pairwise_geometry(float("nan"), 0, 0, 0)
