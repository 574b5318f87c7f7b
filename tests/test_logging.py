"""
Tests for the per-module logger.
"""

from breakout.logging import (
    LogLevel,
    configure_logging,
    disable_logging,
    get_logger,
    restore_config,
    snapshot_config,
)


class TestLogger:

    def test_disabled_by_fixture(self, capsys):
        get_logger('physics').info("hidden")
        assert capsys.readouterr().out == ""

    def test_format_and_args(self, capsys):
        configure_logging(level='INFO')
        get_logger('progression').info("Level %d cleared", 3)
        assert capsys.readouterr().out == "[progression] INFO: Level 3 cleared\n"

    def test_level_filtering(self, capsys):
        configure_logging(level='INFO')
        log = get_logger('layout')
        log.debug("not shown")
        log.warning("shown")
        assert capsys.readouterr().out == "[layout] WARN: shown\n"

    def test_module_override(self, capsys):
        configure_logging(level='ERROR', modules={'physics': 'TRACE'})
        get_logger('physics').trace("brick")
        get_logger('layout').info("quiet")
        assert capsys.readouterr().out == "[physics] TRACE: brick\n"

    def test_config_applies_to_existing_loggers(self):
        log = get_logger('game_mode')
        assert log.level == LogLevel.OFF
        configure_logging(level='DEBUG')
        assert log.is_enabled_for(LogLevel.DEBUG)
        disable_logging()
        assert not log.is_enabled_for(LogLevel.ERROR)

    def test_loggers_are_cached(self):
        assert get_logger('main') is get_logger('main')

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level='LOUD')
        assert get_logger('x').level == LogLevel.INFO


class TestSnapshot:

    def test_restore_brings_back_levels(self):
        configure_logging(level='DEBUG', modules={'physics': 'TRACE'})
        saved = snapshot_config()

        disable_logging()
        assert get_logger('physics').level == LogLevel.OFF

        restore_config(saved)
        assert get_logger('physics').level == LogLevel.TRACE
        assert get_logger('layout').level == LogLevel.DEBUG

    def test_snapshot_is_independent_copy(self):
        saved = snapshot_config()
        configure_logging(level='ERROR', modules={'layout': 'DEBUG'})
        assert 'layout' not in saved['module_levels']
        assert saved['default_level'] == LogLevel.OFF
