# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .key_value import KeyValueBackend, SqlAlchemyKeyValueBackend
from .local_store import SCHEMA_KEY, SCHEMA_VERSION, LocalDataStore, StoreState

__all__ = [
    "SCHEMA_KEY",
    "SCHEMA_VERSION",
    "KeyValueBackend",
    "LocalDataStore",
    "SqlAlchemyKeyValueBackend",
    "StoreState",
]
