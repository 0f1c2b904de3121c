"""Config validation errors."""
from video_views.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The service settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was found in no source."""

    default_code = "setting_missing"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' is not set and has no default",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a bucket capacity below 1.

    Never skipped by :class:`SettingsFactory`: starting on defaults would
    silently ignore the operator's value.
    """

    default_code = "setting_invalid"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' = {value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
