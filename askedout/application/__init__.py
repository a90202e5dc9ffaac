# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .facade import ActionResult, AskService, PublicProfile
from .services.session_manager import SessionManager

__all__ = [
    "ActionResult",
    "AskService",
    "PublicProfile",
    "SessionManager",
]
