# formatkit/conf/models.py

from pydantic import BaseModel, ConfigDict, field_validator

from .defaults import BUILTIN_FORMATS


class FormatKitSettings(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    FORMATS: tuple[str, ...] = BUILTIN_FORMATS
    STRICT_REVIVER: bool = False

    XML_ROOT_TAG: str = "formatkit"
    CSV_DIALECT: str = "excel"
    SHEET_NAME: str = "Sheet1"

    @field_validator("FORMATS", mode="before")
    @classmethod
    def _split_formats(cls, value):
        # Environment variables arrive as "json,yaml"
        if isinstance(value, str):
            value = [part for part in value.split(",")]
        return tuple(str(part).strip().lower().lstrip(".") for part in value if str(part).strip())

    @field_validator("FORMATS")
    @classmethod
    def _known_formats(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in BUILTIN_FORMATS]
        if unknown:
            raise ValueError(f"Unknown formats in FORMATS: {', '.join(unknown)}")
        return value
