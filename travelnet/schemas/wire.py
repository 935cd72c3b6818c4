"""Wire Base Model — shared pydantic configuration for response payloads.

Invariants:
    - Fields are declared snake_case; each gets a camelCase alias
    - Both names are accepted on input (populate_by_name)
    - Unknown keys are ignored: the backend may add fields at any time

Design Decisions:
    - The response decoder converts snake_case keys to camelCase before validation,
      so a payload validates whether the server speaks snake or camel
"""

from pydantic import BaseModel, ConfigDict

from travelnet.core.case_conversion import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )
