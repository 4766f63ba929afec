from typing import List, Literal, NamedTuple, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# int, decimal numeral string or hex string; normalized at encoding time
Numeric = Union[StrictInt, StrictStr]

class _ValueModel(BaseModel):
    """
    Transient value object.
    Accepts both snake_case and the camelCase protocol names.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

# --- Orders ---

class OrderParameters(_ValueModel):
    """
    Everything the offerer signs except the counter.
    """
    offerer: StrictStr
    token: StrictStr
    identifier: Numeric
    currency: StrictStr
    artist: StrictStr
    platform: StrictStr
    start_time: Numeric
    end_time: Numeric
    duration: Numeric
    periods: Numeric
    amount: Numeric
    ratio: Numeric
    royalty: Numeric
    fee: Numeric
    withdraw_fee: Numeric
    salt: Numeric # 32-byte value
    conduit_key: StrictStr # 32-byte value

    def with_counter(self, counter: Numeric) -> "OrderComponents":
        return OrderComponents(**self.model_dump(), counter=counter)

class OrderComponents(OrderParameters):
    """
    The hashed entity. Field order is part of the protocol.
    """
    counter: Numeric

    def to_parameters(self) -> OrderParameters:
        return OrderParameters(**self.model_dump(exclude={"counter"}))

class Order(_ValueModel):
    parameters: OrderParameters
    signature: StrictStr

# --- Fulfillment & Criteria ---

class FulfillmentComponent(_ValueModel):
    order_index: int = Field(ge=0)
    item_index: int = Field(ge=0)

class Fulfillment(_ValueModel):
    offer_components: List[FulfillmentComponent]
    consideration_components: List[FulfillmentComponent]

class CriteriaResolver(_ValueModel):
    order_index: int = Field(ge=0)
    side: Literal[0, 1] # 0 = offer, 1 = consideration
    index: int = Field(ge=0)
    identifier: int = Field(ge=0)
    criteria_proof: List[str]

class OrderStatus(NamedTuple):
    """
    Mirrors the verifier's getOrderStatus return tuple.
    Readable by name or by position.
    """
    is_validated: bool
    is_cancelled: bool
    total_filled: int
    total_size: int
