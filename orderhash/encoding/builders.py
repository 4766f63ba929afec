"""
orderhash: Request Shape Builders

Pure helpers shaping primitive index arrays into verifier request structures.
"""
from typing import Sequence, Union

from ..core.types import (
    CriteriaResolver,
    Fulfillment,
    FulfillmentComponent,
    Order,
    OrderComponents,
    OrderStatus,
)
from .numeral import NumeralInput
from .scalar import to_bn
from .signature import compact_signature

IndexPair = Sequence[int]


def to_fulfillment_components(pairs: Sequence[IndexPair]) -> list:
    return [
        FulfillmentComponent(order_index=order_index, item_index=item_index)
        for order_index, item_index in pairs
    ]


def to_fulfillment(offer_pairs: Sequence[IndexPair], consideration_pairs: Sequence[IndexPair]) -> Fulfillment:
    return Fulfillment(
        offer_components=to_fulfillment_components(offer_pairs),
        consideration_components=to_fulfillment_components(consideration_pairs),
    )


def build_resolver(
    order_index: int,
    side: int,
    index: int,
    identifier: NumeralInput,
    criteria_proof: Sequence[str],
) -> CriteriaResolver:
    return CriteriaResolver(
        order_index=order_index,
        side=side,
        index=index,
        identifier=to_bn(identifier),
        criteria_proof=list(criteria_proof),
    )


def build_order_status(
    is_validated: bool,
    is_cancelled: bool,
    total_filled: Union[int, str],
    total_size: Union[int, str],
) -> OrderStatus:
    """
    Numbers are normalized through to_bn; flags are kept as given.
    """
    return OrderStatus(
        is_validated=bool(is_validated),
        is_cancelled=bool(is_cancelled),
        total_filled=to_bn(total_filled),
        total_size=to_bn(total_size),
    )


def build_order(components: OrderComponents, signature: str) -> Order:
    """
    Pair the signed parameters (counter dropped) with a compact signature.
    """
    return Order(
        parameters=components.to_parameters(),
        signature=compact_signature(signature),
    )
