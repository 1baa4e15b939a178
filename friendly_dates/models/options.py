"""
Formatting options accepted by format_date.
"""

from datetime import tzinfo
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from friendly_dates.config import resolve_timezone, settings


class FormatOptions(BaseModel):
    """Independent switches controlling how a timestamp is rendered"""

    full: bool = Field(
        default=False, description="Include seconds and always render the full date"
    )
    hour12: bool = Field(default=False, description="Use a 12-hour clock with AM/PM")
    today: bool = Field(
        default=False, description="Prefix same-day output with 'Today at '"
    )
    tz: Optional[Union[str, tzinfo]] = Field(
        default=None,
        description="Timezone for rendering and day comparison (defaults to DISPLAY_TIMEZONE)",
    )

    @field_validator("tz")
    @classmethod
    def _check_timezone(cls, value):
        if isinstance(value, str):
            resolve_timezone(value)
        return value

    def get_timezone(self) -> tzinfo:
        """Resolve the effective display timezone"""
        if self.tz is None:
            return settings.get_display_timezone()
        if isinstance(self.tz, str):
            return resolve_timezone(self.tz)
        return self.tz

    @classmethod
    def coerce(
        cls, options: Union["FormatOptions", Mapping[str, Any], bool, None]
    ) -> "FormatOptions":
        """
        Build options from any accepted form.

        A bare boolean is the legacy calling convention and means ``full``.
        """
        if options is None:
            return cls()
        if isinstance(options, FormatOptions):
            return options
        if isinstance(options, bool):
            return cls(full=options)
        if isinstance(options, Mapping):
            options = dict(options)
        # Non-mapping input surfaces as a ValidationError
        return cls.model_validate(options)

    class Config:
        arbitrary_types_allowed = True
        extra = "forbid"
        frozen = True
        json_schema_extra = {
            "example": {
                "full": False,
                "hour12": True,
                "today": True,
                "tz": "Europe/Prague",
            }
        }
