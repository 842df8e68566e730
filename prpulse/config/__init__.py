from prpulse.config.settings import (
    CheckSettings,
    GitHubSettings,
    LoggingSettings,
    PipelineSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'CheckSettings',
    'PipelineSettings',
    'load_settings',
]
