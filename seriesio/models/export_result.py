"""
导出结果模型
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class ResultKind(str, Enum):
    """导出结果类型"""
    RETURNED = "returned"  # 直接返回表示
    SAVED = "saved"  # 已保存到文件或触发下载


@dataclass(frozen=True)
class ExportResult:
    """导出结果

    RETURNED 时 value 为导出的表示（字符串或对象），
    SAVED 时 destination 为实际写入的位置，value 为 None。
    """
    kind: ResultKind
    value: Any = None
    destination: Optional[Path] = None

    @classmethod
    def returned(cls, value: Any) -> "ExportResult":
        return cls(kind=ResultKind.RETURNED, value=value)

    @classmethod
    def saved_to(cls, destination: Path) -> "ExportResult":
        return cls(kind=ResultKind.SAVED, destination=Path(destination))

    @property
    def is_saved(self) -> bool:
        return self.kind is ResultKind.SAVED
