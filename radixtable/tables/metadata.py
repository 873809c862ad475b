# radixtable/tables/metadata.py
from datetime import datetime
from pathlib import Path
from typing import Any, Dict
from pydantic import BaseModel, Field, ValidationError
from radixtable.logging import get_logger, LogTemplates
from radixtable.utils.files import FileOperationError, read_json, write_file

logger = get_logger("tables.metadata")

class TableData(BaseModel):
    """On-disk layout of a prefix table."""
    entries: Dict[str, Any] = Field(default_factory=dict)  # key -> value，保持插入顺序
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def load(cls, path: Path) -> "TableData":
        """Load a table from JSON; missing or broken files give an empty table."""
        if not path.exists():
            return cls()
        try:
            return cls.model_validate(read_json(path))
        except (FileOperationError, ValidationError) as e:
            logger.error(LogTemplates.ERROR.format(msg=f"Failed to load table {path}: {e}"))
        return cls()

    def save(self, path: Path) -> None:
        """Save the table as JSON."""
        self.updated_at = datetime.now()
        write_file(path, self.model_dump_json(indent=2))

# 示例用法
if __name__ == "__main__":
    table = TableData()
    table.entries["/api"] = "api-backend"
    table.entries["/api/v2"] = {"host": "10.0.0.2", "port": 8080}
    print(table.model_dump_json(indent=2))
