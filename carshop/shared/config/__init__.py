# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import DEFAULT_ALLOWED_ORIGINS, AppConfig, load_config

__all__ = ["AppConfig", "DEFAULT_ALLOWED_ORIGINS", "load_config"]
