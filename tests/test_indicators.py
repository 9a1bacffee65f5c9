"""
Tests for EMA and RSI indicators.

Run with: pytest tests/test_indicators.py -v
"""
import pytest

from cryptomate.indicators.ema import compute_ema, dual_ema_trend, latest_ema
from cryptomate.indicators.rsi import compute_rsi, interpret_rsi, latest_rsi
from cryptomate.models import Momentum, Trend


class TestComputeEMA:
    """Tests for compute_ema."""

    def test_seed_is_simple_mean(self):
        """The first defined value is the SMA of the first period values."""
        ema = compute_ema([1, 2, 3, 4, 5], 3)

        assert len(ema) == 5
        assert ema[0] is None
        assert ema[1] is None
        assert ema[2] == pytest.approx(2.0)

    def test_recursive_values(self):
        """Later values follow the recursive EMA formula."""
        ema = compute_ema([1, 2, 3, 4, 5], 3)

        # k = 0.5: (4 - 2) * 0.5 + 2 = 3, (5 - 3) * 0.5 + 3 = 4
        assert ema[3] == pytest.approx(3.0)
        assert ema[4] == pytest.approx(4.0)

    def test_known_series(self):
        """EMA5 over a 20-value series ends near 112."""
        values = [
            100, 102, 101, 103, 104, 102, 105, 106, 104, 107,
            108, 107, 109, 110, 108, 111, 112, 110, 113, 114,
        ]
        ema = compute_ema(values, 5)

        assert len(ema) == len(values)
        assert ema[-1] == pytest.approx(112.0, abs=0.05)

    def test_insufficient_data(self):
        """Fewer values than the period yields an empty series."""
        assert compute_ema([100, 102], 5) == []

    def test_empty_input(self):
        """Empty input yields an empty series."""
        assert compute_ema([], 5) == []

    @pytest.mark.parametrize("period", [0, -1])
    def test_invalid_period_raises(self, period):
        """Non-positive periods are rejected."""
        with pytest.raises(ValueError):
            compute_ema([1, 2, 3], period)

    def test_latest_ema(self):
        """latest_ema returns the final defined value."""
        assert latest_ema([1, 2, 3, 4, 5], 3) == pytest.approx(4.0)

    def test_latest_ema_none(self):
        """latest_ema returns None when nothing is defined."""
        assert latest_ema([1, 2], 3) is None


class TestDualEMATrend:
    """Tests for the EMA20/EMA50 trend reading."""

    def test_bullish(self):
        """A steady uptrend puts EMA20 above EMA50."""
        prices = [100 + i * 0.5 for i in range(100)]
        result = dual_ema_trend(prices)

        assert result.trend is Trend.BULLISH
        assert result.ema_fast is not None
        assert result.ema_slow is not None
        assert result.ema_fast > result.ema_slow

    def test_bearish(self):
        """A steady downtrend puts EMA20 below EMA50."""
        prices = [200 - i * 0.5 for i in range(100)]
        result = dual_ema_trend(prices)

        assert result.trend is Trend.BEARISH

    def test_flat_is_neutral(self):
        """Equal EMAs read as neutral."""
        result = dual_ema_trend([100.0] * 60)

        assert result.trend is Trend.NEUTRAL
        assert result.ema_fast == pytest.approx(100.0)
        assert result.ema_slow == pytest.approx(100.0)

    def test_insufficient_history(self):
        """Without 50 closes both values are None and the trend is neutral."""
        result = dual_ema_trend([100 + i for i in range(49)])

        assert result.trend is Trend.NEUTRAL
        assert result.ema_fast is None
        assert result.ema_slow is None


class TestComputeRSI:
    """Tests for compute_rsi."""

    def test_hand_computed_values(self):
        """Wilder smoothing over an alternating series."""
        rsi = compute_rsi([1, 2, 1, 2, 1], 2)

        assert rsi == [pytest.approx(75.0), pytest.approx(37.5)]

    def test_bounds(self):
        """Every RSI value lies in [0, 100]."""
        values = [
            44.34, 44.09, 44.15, 43.61, 44.33, 44.83, 45.10, 45.42,
            45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00,
            46.03, 46.41, 46.22, 45.64,
        ]
        rsi = compute_rsi(values, 14)

        assert len(rsi) == len(values) - 14 - 1
        for value in rsi:
            assert 0 <= value <= 100

    def test_only_gains(self):
        """No losses gives RSI 100."""
        rsi = compute_rsi([float(i) for i in range(30)], 14)

        assert rsi
        assert all(value == 100.0 for value in rsi)

    def test_only_losses(self):
        """No gains gives RSI 0."""
        rsi = compute_rsi([float(30 - i) for i in range(30)], 14)

        assert rsi
        assert all(value == pytest.approx(0.0) for value in rsi)

    def test_insufficient_data(self):
        """Fewer than period + 1 values yields an empty series."""
        assert compute_rsi([100, 102, 101], 14) == []
        assert compute_rsi([], 14) == []

    def test_seed_window_only(self):
        """Exactly period + 1 values fills the seed but emits nothing."""
        assert compute_rsi([float(i) for i in range(15)], 14) == []

    def test_invalid_period_raises(self):
        """Non-positive periods are rejected."""
        with pytest.raises(ValueError):
            compute_rsi([1, 2, 3], 0)

    def test_latest_rsi(self):
        """latest_rsi returns a bounded value for enough history."""
        import math

        values = [100 + math.sin(i) * 10 for i in range(50)]
        latest = latest_rsi(values, 14)

        assert latest is not None
        assert 0 <= latest <= 100

    def test_latest_rsi_none(self):
        """latest_rsi returns None for short history."""
        assert latest_rsi([1, 2, 3], 14) is None


class TestInterpretRSI:
    """Tests for interpret_rsi thresholds."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (25, Momentum.OVERSOLD),
            (29.999, Momentum.OVERSOLD),
            (30, Momentum.NEUTRAL),
            (50, Momentum.NEUTRAL),
            (70, Momentum.NEUTRAL),
            (70.001, Momentum.OVERBOUGHT),
            (75, Momentum.OVERBOUGHT),
        ],
    )
    def test_thresholds(self, value, expected):
        signal = interpret_rsi(value)

        assert signal.signal is expected
        assert signal.value == value

    def test_none_value(self):
        """Missing RSI is neutral with no value."""
        signal = interpret_rsi(None)

        assert signal.signal is Momentum.NEUTRAL
        assert signal.value is None

    def test_custom_thresholds(self):
        """Thresholds can be overridden per call."""
        assert interpret_rsi(33, oversold=34).signal is Momentum.OVERSOLD
