"""Tests for status reports."""

import pytest

from nespak.stats import CompressionStats, print_report


def test_compression_figures():
    stats = CompressionStats(11, 8)
    assert stats.saved == 3
    assert stats.compression == pytest.approx(27.27, abs=0.01)
    assert stats.ratio == pytest.approx(1.375)


def test_empty_sizes():
    assert CompressionStats(0, 0).compression == 0.0
    assert CompressionStats(0, 0).ratio == 0.0


def test_report():
    report = CompressionStats(11, 8).report()
    assert 'Before:        11 bytes' in report
    assert 'After:         8 bytes' in report
    assert 'Compression:   27.27%' in report
    assert 'Ratio:         1.4:1' in report


def test_print_report(capsys):
    print_report(CompressionStats(100, 2))
    out = capsys.readouterr().out.splitlines()
    assert out[1] == 'Status Report'
    assert out[-1] == 'Ratio:         50.0:1'
