# radixtable/logging.py
from pathlib import Path
import logging
import sys
from radixtable.config import CONFIG

ROOT_LOGGER = "radixtable"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

def setup_logger(
    log_dir: Path = CONFIG.log_dir,
    level: str = CONFIG.log_level,
    console: bool = CONFIG.log_console,
    filename: str = CONFIG.log_filename,
) -> logging.Logger:
    """配置项目根日志记录器，各模块记录器向其传播"""
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:  # 避免重复添加处理器
        return logger
    logger.setLevel(LEVELS.get(level.lower(), logging.INFO))

    # 文件处理器，首次写入时才打开文件
    Path(log_dir).mkdir(exist_ok=True, parents=True)
    file_handler = logging.FileHandler(Path(log_dir) / filename, encoding="utf-8", delay=True)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(file_handler)

    # 控制台处理器写 stderr，stdout 留给命令输出
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)

    return logger

def set_level(level: str) -> None:
    """Change the level of every project logger at once."""
    logging.getLogger(ROOT_LOGGER).setLevel(LEVELS.get(level.lower(), logging.INFO))

class LogTemplates:
    """日志消息模板"""
    TABLE_LOADED = "Loaded table {path} ({count} entries)"
    TABLE_SAVED = "Saved table {path} ({count} entries)"
    ENTRY_ADDED = "Added {key!r} at depth {depth}"
    ENTRY_REMOVED = "Removed {key!r} at depth {depth}"
    ENTRY_MISSING = "No entry for {key!r}"
    ERROR = "Error: {msg}"

def get_logger(name: str) -> logging.Logger:
    setup_logger()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
