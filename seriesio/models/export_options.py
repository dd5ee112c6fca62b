"""
导出选项数据模型
每种导出格式一个不可变的选项模型，未识别的键会被忽略
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..utils.exceptions import InvalidOptionError


class JsonFormat(str, Enum):
    """JSON输出结构"""
    COLUMN = "column"  # {列名: [值...]}
    ROW = "row"  # [{列名: 值}, ...]


# Excel 工作表名中不允许出现的字符
SHEET_NAME_FORBIDDEN = set('[]:*?/\\')
SHEET_NAME_MAX_LENGTH = 31


class ExportOptions(BaseModel):
    """导出选项基类"""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CsvOptions(ExportOptions):
    """CSV导出选项"""
    header: bool = Field(default=True, description="是否以列名作为首行")
    sep: str = Field(default=",", description="字段分隔符（单个字符）")
    file_name: str = Field(default="data.csv", description="下载文件名")
    file_path: Optional[str] = Field(default=None, description="本地写入路径")
    download: bool = Field(default=False, description="是否触发下载")

    @field_validator('sep')
    @classmethod
    def validate_sep(cls, v):
        """验证分隔符"""
        if len(v) != 1:
            raise ValueError(f"分隔符必须是单个字符: {v!r}")
        # polars 按单字节写出分隔符
        if not v.isascii():
            raise ValueError(f"分隔符必须是单个ASCII字符: {v!r}")
        if v in ('"', '\n', '\r'):
            raise ValueError(f"不支持的分隔符: {v!r}")
        return v


class JsonOptions(ExportOptions):
    """JSON导出选项"""
    format: JsonFormat = Field(default=JsonFormat.COLUMN, description="输出结构: column/row")
    file_name: str = Field(default="data.json", description="下载文件名")
    file_path: Optional[str] = Field(default=None, description="本地写入路径")
    download: bool = Field(default=False, description="是否触发下载")


class ExcelOptions(ExportOptions):
    """Excel导出选项

    file_path 与 file_name 可以同时存在，由保存平台决定使用哪一个。
    """
    sheet_name: str = Field(default="Sheet1", description="工作表名称")
    file_path: str = Field(default="./output.xlsx", description="本地写入路径")
    file_name: str = Field(default="output.xlsx", description="下载文件名")

    @field_validator('sheet_name')
    @classmethod
    def validate_sheet_name(cls, v):
        """验证工作表名称"""
        if not v or len(v) > SHEET_NAME_MAX_LENGTH:
            raise ValueError(f"工作表名称长度必须在1到{SHEET_NAME_MAX_LENGTH}之间: {v!r}")
        if SHEET_NAME_FORBIDDEN & set(v):
            raise ValueError(f"工作表名称包含非法字符: {v!r}")
        return v


OptionsT = TypeVar("OptionsT", bound=ExportOptions)


def _to_field_names(model: Type[ExportOptions], options: Mapping[str, Any]) -> Dict[str, Any]:
    """把 camelCase 别名换成字段名，同一选项的两种写法合并为一个键"""
    aliases = {
        field.alias: name
        for name, field in model.model_fields.items()
        if field.alias
    }
    return {aliases.get(key, key): value for key, value in options.items()}


def resolve_options(
    model: Type[OptionsT],
    options: Union[OptionsT, Mapping[str, Any], None] = None,
    **overrides: Any
) -> OptionsT:
    """合并并验证导出选项

    Args:
        model: 选项模型类
        options: 选项模型实例或字典
        **overrides: 关键字参数，覆盖 options 中的同名项

    Returns:
        验证后的选项模型实例

    Raises:
        InvalidOptionError: 选项值不合法
    """
    if isinstance(options, model) and not overrides:
        return options

    if isinstance(options, ExportOptions):
        values = options.model_dump()
    elif options is None:
        values = {}
    elif isinstance(options, Mapping):
        values = _to_field_names(model, options)
    else:
        raise InvalidOptionError(
            f"选项必须是字典或{model.__name__}: {type(options).__name__}",
            details={"options_type": type(options).__name__},
        )
    values.update(_to_field_names(model, overrides))

    try:
        return model.model_validate(values)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise InvalidOptionError(
            f"无效的{model.__name__}选项: {', '.join(fields)}",
            details={"errors": e.errors(include_url=False)},
            original_exception=e,
        ) from e
