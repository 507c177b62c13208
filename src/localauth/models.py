"""
Pydantic model of the browser launch options handed to the automation engine.

Only ``user_data_dir`` is interpreted here; every other option is kept as an
extra field and passed through untouched. Options that arrive with the
camelCase ``userDataDir`` key are dumped with that key again.
"""

import os
from typing import Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_serializer,
    model_validator,
)

CAMEL_CASE_KEY = "userDataDir"


class BrowserLaunchOptions(BaseModel):
    """Startup options for the browser engine."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_data_dir: str | None = Field(
        default=None,
        validation_alias=AliasChoices("user_data_dir", CAMEL_CASE_KEY),
    )

    _camel_case: bool = PrivateAttr(default=False)

    @field_validator("user_data_dir", mode="before")
    @classmethod
    def _fspath(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key(cls, data: Any, handler):
        model = handler(data)
        if (
            isinstance(data, Mapping)
            and CAMEL_CASE_KEY in data
            and "user_data_dir" not in data
        ):
            model._camel_case = True
        return model

    @model_serializer(mode="wrap")
    def _restore_key(self, handler):
        data = handler(self)
        if self._camel_case and "user_data_dir" in data:
            data[CAMEL_CASE_KEY] = data.pop("user_data_dir")
        return data

    @classmethod
    def coerce(
        cls, options: "BrowserLaunchOptions | Mapping[str, Any] | None"
    ) -> "BrowserLaunchOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def with_user_data_dir(self, path: str) -> "BrowserLaunchOptions":
        """Return a copy with ``user_data_dir`` replaced; ``self`` is unchanged."""
        return self.model_copy(update={"user_data_dir": path})
