# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Environment-driven settings.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

ENVIRONMENT_LOG_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG,
    'test': logging.WARNING
}


@dataclass
class Settings:
    """Runtime settings for logging and tracing."""
    environment: str = 'development'
    service_name: str = 'relief-registry'
    service_version: str = '1.0.0'
    otel_enabled: bool = False
    log_level: Optional[str] = None

    @property
    def effective_log_level(self) -> int:
        """Explicit LOG_LEVEL wins, otherwise the environment default."""
        if self.log_level:
            level = logging.getLevelName(self.log_level.upper())
            if isinstance(level, int):
                return level
        return ENVIRONMENT_LOG_LEVELS.get(self.environment, logging.WARNING)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        environment=os.getenv('ENVIRONMENT', 'development'),
        service_name=os.getenv('SERVICE_NAME', 'relief-registry'),
        service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
        otel_enabled=os.getenv('OTEL_ENABLED', 'false').lower() == 'true',
        log_level=os.getenv('LOG_LEVEL') or None
    )
