"""API schemas.

Pydantic models shared by repositories (as return types) and routes (as
request/response models). Fields are snake_case in Python and camelCase on the
wire, which is what the web client reads (`playerId`, `buyIn`, ...).
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Player(CamelModel):
    id: int
    name: str


class PlayerCreate(CamelModel):
    name: str


class Session(CamelModel):
    """One recorded poker session. `profit` is derived, never stored."""

    id: int
    player_id: int
    buy_in: float
    cash_out: float
    game_type: str
    session_date: date

    @computed_field
    @property
    def profit(self) -> float:
        return round(self.cash_out - self.buy_in, 2)


class SessionCreate(CamelModel):
    player_id: int
    buy_in: float
    cash_out: float
    game_type: str
    session_date: date


class Message(BaseModel):
    message: str
