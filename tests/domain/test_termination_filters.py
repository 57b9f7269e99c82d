from __future__ import annotations

import pytest

from life_kernel.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)


def test_extinction_detector() -> None:
    detector = ExtinctionDetector()
    assert detector.observe(0) is True
    assert detector.observe(3) is False


def test_halt_detector_triggers_after_exact_window() -> None:
    detector = HaltDetector(window=3)
    snapshot = frozenset({(0, 0), (1, 1)})

    assert detector.observe(snapshot) is False
    assert detector.observe(snapshot) is False
    assert detector.observe(snapshot) is False
    assert detector.observe(snapshot) is True


def test_halt_detector_resets_after_change() -> None:
    detector = HaltDetector(window=2)
    snap_a = frozenset({(0, 0)})
    snap_b = frozenset({(1, 0)})

    assert detector.observe(snap_a) is False
    assert detector.observe(snap_a) is False
    assert detector.observe(snap_b) is False
    assert detector.observe(snap_b) is False
    assert detector.observe(snap_b) is True


def test_halt_detector_rejects_zero_window() -> None:
    with pytest.raises(ValueError):
        HaltDetector(window=0)


def test_short_period_detector_detects_two_cycle() -> None:
    detector = ShortPeriodDetector(max_period=2, history_size=6)
    a = frozenset({(1, 0), (1, 1), (1, 2)})
    b = frozenset({(0, 1), (1, 1), (2, 1)})
    assert detector.observe(a) is False
    assert detector.observe(b) is False
    assert detector.observe(a) is False
    assert detector.observe(b) is True


def test_short_period_detector_ignores_still_life() -> None:
    detector = ShortPeriodDetector(max_period=3, history_size=6)
    a = frozenset({(0, 0)})
    for _ in range(6):
        assert detector.observe(a) is False


def test_short_period_detector_detects_three_cycle() -> None:
    detector = ShortPeriodDetector(max_period=3, history_size=6)
    snaps = [frozenset({(i, 0)}) for i in range(3)]
    observed = [detector.observe(snaps[i % 3]) for i in range(6)]
    assert observed == [False, False, False, False, False, True]


def test_short_period_detector_validates_arguments() -> None:
    with pytest.raises(ValueError):
        ShortPeriodDetector(max_period=1, history_size=4)
    with pytest.raises(ValueError):
        ShortPeriodDetector(max_period=3, history_size=5)


def test_termination_reason_values() -> None:
    assert TerminationReason.EXTINCT.value == "extinct"
    assert TerminationReason("halt") is TerminationReason.HALT
