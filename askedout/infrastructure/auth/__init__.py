# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .token_codec import DEFAULT_TOKEN_TTL, Base64TokenCodec

__all__ = ["Base64TokenCodec", "DEFAULT_TOKEN_TTL"]
