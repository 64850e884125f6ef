"""
Тесты для Angular Fold — кратчайшее угловое расстояние и смещение азимута
"""

import pytest

from src.core.math.angular_fold import fold_angle, signed_offset


class TestFoldAngle:
    """Тесты для fold_angle"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (0, 0, 0),
            (0, 90, 90),
            (90, 0, 90),
            (0, 180, 180),
            (10, 350, 20),
            (350, 10, 20),
            (90, 271, 179),
            (0, 359, 1),
        ],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        """Известные значения свёртки"""
        assert fold_angle(a, b) == expected

    def test_shortest_arc_for_all_headings(self) -> None:
        """Для курсов в [0, 360) результат равен кратчайшей дуге в [0, 180]"""
        for a in range(0, 360, 7):
            for b in range(0, 360, 11):
                raw = abs(a - b)
                folded = fold_angle(a, b)
                assert 0 <= folded <= 180
                assert folded == min(raw, 360 - raw)

    def test_symmetric(self) -> None:
        """fold(a, b) == fold(b, a)"""
        for a, b in [(0, 45), (123, 321), (359, 1)]:
            assert fold_angle(a, b) == fold_angle(b, a)

    def test_full_turn_not_normalized(self) -> None:
        """Разность ровно 360 даёт 360 (входы не нормализуются)"""
        assert fold_angle(0, 360) == 360

    def test_fractional_headings(self) -> None:
        """Дробные курсы"""
        assert fold_angle(0, 89.5) == pytest.approx(89.5)
        assert fold_angle(0, 270.5) == pytest.approx(89.5)

    def test_nan_rejected(self) -> None:
        """NaN отвергается"""
        with pytest.raises(ValueError):
            fold_angle(float("nan"), 0)


class TestSignedOffset:
    """Тесты для signed_offset"""

    @pytest.mark.parametrize(
        "azimuth, bearing, expected",
        [
            (10, 0, 10),
            (350, 0, 350),
            (0, 180, 180),
            (0, 90, 270),
            (180, 180, 0),
        ],
    )
    def test_known_values(self, azimuth: int, bearing: int, expected: int) -> None:
        """Смещение по часовой стрелке от пеленга"""
        assert signed_offset(azimuth, bearing) == expected

    def test_out_of_range_azimuth_wraps(self) -> None:
        """Азимуты вне [0, 360) приводятся к [0, 360)"""
        assert signed_offset(-10, 0) == 350
        assert signed_offset(725, 0) == 5

    def test_always_in_range(self) -> None:
        """Результат всегда в [0, 360)"""
        for azimuth in range(-720, 720, 13):
            for bearing in (0, 90, 179, 359):
                assert 0 <= signed_offset(azimuth, bearing) < 360
