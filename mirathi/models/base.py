# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base models with common configuration for snapshots and compliance results.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSnapshot(BaseModel):
    """Immutable value snapshot handed to the compliance engine by storage."""

    model_config = ConfigDict(
        # Accept storage rows in camelCase or snake_case
        alias_generator=to_camel,
        populate_by_name=True,
        # Use enum values instead of enum objects
        use_enum_values=True,
        frozen=True,
        extra='ignore'
    )


class BaseResult(BaseModel):
    """Base model for engine output serialized to callers."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        frozen=True
    )

    def to_response(self) -> dict:
        """Serialize to a JSON-ready dictionary with camelCase keys."""
        return self.model_dump(mode='json', by_alias=True)
