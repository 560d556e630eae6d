"""Reward Record — a token grant or certificate minted by the Reward Issuer."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class RewardRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["token", "certificate"]
    id: str
    amount: Optional[int] = None            # Tokens only
