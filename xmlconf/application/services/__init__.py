# Application Services

"""
应用服务 - 业务用例实现
"""

from .display_settings_service import DisplaySettingsService

__all__ = [
    'DisplaySettingsService',
]
