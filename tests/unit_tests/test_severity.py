"""
严重级别模型单元测试

覆盖控制台字符、颜色转义以及 syslog 映射表。
"""

from __future__ import annotations

import logging

import pytest

from taglog.severity import (
    LOG_CRIT,
    LOG_DEBUG,
    LOG_ERR,
    LOG_INFO,
    LOG_WARNING,
    Severity,
    render_glyph,
    syslog_priority,
)


class TestSeverityOrdering:
    """级别顺序测试"""

    def test_levels_are_ordered(self) -> None:
        """VERBOSE 到 FATAL 严格递增"""
        assert Severity.VERBOSE < Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL
        assert [int(s) for s in Severity] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize("value", [-1, 6, 100, "2", None, 2.0, True])
    def test_coerce_rejects_out_of_range(self, value) -> None:
        """非法优先级返回 None 而不是抛出异常"""
        assert Severity.coerce(value) is None

    def test_coerce_accepts_plain_int(self) -> None:
        assert Severity.coerce(4) is Severity.ERROR


class TestGlyphTable:
    """控制台字符映射测试"""

    @pytest.mark.parametrize(
        ("severity", "expected"),
        [
            (Severity.VERBOSE, "V"),
            (Severity.DEBUG, "\033[1;34mD\033[0m"),
            (Severity.INFO, "\033[01;36mI\033[0m"),
            (Severity.WARN, "\033[01;35mW\033[0m"),
            (Severity.ERROR, "\033[01;31mE\033[0m"),
            (Severity.FATAL, "\033[01;31mF\033[0m"),
        ],
    )
    def test_colored_glyphs(self, severity: Severity, expected: str) -> None:
        assert render_glyph(severity) == expected

    def test_plain_glyphs(self) -> None:
        """关闭颜色时只输出单个字符"""
        glyphs = [render_glyph(s, use_color=False) for s in Severity]
        assert glyphs == ["V", "D", "I", "W", "E", "F"]

    @pytest.mark.parametrize("priority", [-3, 6, 42])
    def test_unknown_priority_renders_empty(self, priority: int) -> None:
        assert render_glyph(priority) == ""
        assert render_glyph(priority, use_color=False) == ""


class TestSyslogMapping:
    """syslog 级别映射测试"""

    @pytest.mark.parametrize(
        ("severity", "expected"),
        [
            (Severity.VERBOSE, LOG_DEBUG),
            (Severity.DEBUG, LOG_DEBUG),
            (Severity.INFO, LOG_INFO),
            (Severity.WARN, LOG_WARNING),
            (Severity.ERROR, LOG_ERR),
            (Severity.FATAL, LOG_CRIT),
        ],
    )
    def test_mapping_table(self, severity: Severity, expected: int) -> None:
        assert syslog_priority(severity) == expected

    def test_unknown_priority_maps_to_debug(self) -> None:
        """未定义的优先级统一映射为最详细的 debug 级别"""
        assert syslog_priority(9) == LOG_DEBUG
        assert syslog_priority(-1) == LOG_DEBUG


class TestStdlibLevels:
    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.CRITICAL, Severity.FATAL),
            (logging.ERROR, Severity.ERROR),
            (logging.WARNING, Severity.WARN),
            (logging.INFO, Severity.INFO),
            (logging.DEBUG, Severity.DEBUG),
            (5, Severity.VERBOSE),
        ],
    )
    def test_from_stdlib(self, levelno: int, expected: Severity) -> None:
        assert Severity.from_stdlib(levelno) is expected
