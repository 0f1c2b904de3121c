"""Config settings – 12-factor env-based configuration."""
from video_views.config.settings.base import Settings
from video_views.config.settings.factory import SettingsFactory
from video_views.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from video_views.config.settings.views import ViewsSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "ViewsSettings",
]
