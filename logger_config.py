"""
Logging setup for the agenda.
All modules log through named loggers under one root handler.
"""
import logging
import sys

def setup_logger(level=logging.INFO):
    """Configure the root logger once."""
    root_logger = logging.getLogger()

    # 이미 핸들러가 있으면 중복 추가 방지
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '[%(levelname)s] %(name)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    return root_logger

def add_file_handler(path, level=logging.WARNING):
    """Also write warnings and errors to `path`."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return handler

    file_handler = logging.FileHandler(path, mode='a', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    root_logger.addHandler(file_handler)
    return file_handler
