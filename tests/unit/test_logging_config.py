import logging

from debug_lib.logging_config import configure_logging


def test_defaults_to_warning_without_config(tmp_path):
    configure_logging(tmp_path / 'missing.yml')
    assert logging.getLogger().level == logging.WARNING


def test_reads_log_level_from_yaml(tmp_path):
    cfg = tmp_path / 'server_config.yml'
    cfg.write_text('log_level: debug\n', encoding='utf-8')
    configure_logging(cfg)
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_warning(tmp_path):
    cfg = tmp_path / 'server_config.yml'
    cfg.write_text('log_level: chatty\n', encoding='utf-8')
    configure_logging(cfg)
    assert logging.getLogger().level == logging.WARNING


def test_invalid_yaml_falls_back_to_warning(tmp_path):
    cfg = tmp_path / 'server_config.yml'
    cfg.write_text('log_level: [unclosed\n', encoding='utf-8')
    configure_logging(cfg)
    assert logging.getLogger().level == logging.WARNING


def test_access_log_is_quieted(tmp_path):
    configure_logging(tmp_path / 'missing.yml')
    assert logging.getLogger('uvicorn.access').level == logging.WARNING
