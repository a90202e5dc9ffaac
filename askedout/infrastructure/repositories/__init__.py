# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .directory import StoreUserDirectory
from .questions import StoreQuestionRepository

__all__ = ["StoreQuestionRepository", "StoreUserDirectory"]
