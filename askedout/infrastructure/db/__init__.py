# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import StoreEntry
from .session import Base, build_engine, build_session_factory, init_db, session_scope

__all__ = [
    "Base",
    "StoreEntry",
    "build_engine",
    "build_session_factory",
    "init_db",
    "session_scope",
]
