# radixtable/utils/files.py
from pathlib import Path
import json
from typing import Any, Callable, Union
from functools import wraps
from radixtable.logging import get_logger, LogTemplates

logger = get_logger("utils.files")

# Custom exceptions
class FileOperationError(Exception):
    pass

class FileNotFoundError(FileOperationError):
    pass

class FilePermissionError(FileOperationError):
    pass

def file_op(must_exist: bool) -> Callable:
    """Normalize the path argument and turn OS/parse failures into FileOperationError."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(filepath: Union[str, Path], *args, **kwargs):
            path = Path(filepath)
            if must_exist and not path.is_file():
                logger.error(LogTemplates.ERROR.format(msg=f"Not a readable file: {path}"))
                raise FileNotFoundError(f"Not a readable file: {path}")
            try:
                return func(path, *args, **kwargs)
            except PermissionError as e:
                logger.error(LogTemplates.ERROR.format(msg=f"Permission denied: {path}"))
                raise FilePermissionError(f"Permission denied: {path}") from e
            except (OSError, ValueError) as e:
                logger.error(LogTemplates.ERROR.format(msg=f"{func.__name__}({path}) failed: {e}"))
                raise FileOperationError(f"{func.__name__}({path}) failed: {e}") from e
        return wrapper
    return decorator

@file_op(must_exist=True)
def read_json(filepath: Path, encoding: str = "utf-8") -> Any:
    return json.loads(filepath.read_text(encoding))

@file_op(must_exist=False)
def write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(content, encoding)
    logger.debug(f"Wrote to {filepath}")
