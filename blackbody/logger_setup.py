# logger_setup.py

import json
import logging
import os

LOGGER_NAME = "blackbody"

DEFAULT_LOGGING = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "log_file": None,
}


def load_logging_config(config_path='config.json'):
    """
    读取 config.json 中的 "logging" 配置，缺失的键使用默认值。
    配置文件不存在时返回默认配置。
    """
    log_config = dict(DEFAULT_LOGGING)
    if os.path.exists(config_path):
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        log_config.update(config.get('logging', {}))
    return log_config


def setup_logging(config_path='config.json'):
    """
    为应用配置专用 logger（不是 root logger），输出到控制台，可选输出到日志文件。
    重复调用时先清除旧的 handler；配置了 log_file 时自动创建其所在目录。
    """
    log_config = load_logging_config(config_path)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])

    # 不向 root logger 传播，避免与 streamlit 自身的日志重复
    logger.propagate = False

    formatter = logging.Formatter(log_config['format'])

    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = log_config.get('log_file')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Level: {log_config['level']}. Log file: {log_file}")
    return logger
