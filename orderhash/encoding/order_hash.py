"""
orderhash: Struct Hash Deriver

Order hash = keccak256(typeHash || enc(offerer) || ... || enc(counter))

Preimage layout (frozen, 608 bytes):
  - offset 0:            keccak256(ORDER_TYPE_STRING)
  - offset 32 * (i + 1): field i of ORDER_COMPONENTS_LAYOUT, one 32-byte word,
                         value right-aligned after enforcing its declared width

The type string and the buffer offsets are both generated from
ORDER_COMPONENTS_LAYOUT. The verifier recomputes the same hash; a mismatch
here produces a wrong identifier with no local error, so the layout must only
change together with the verifier's definition.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from eth_utils import keccak

from ..core.logger import get_logger
from ..core.types import OrderComponents
from .scalar import ADDRESS_BYTES, WORD_BYTES, to_word

logger = get_logger("OrderHash")


@dataclass(frozen=True)
class FieldSlot:
    name: str           # protocol (camelCase) name
    attribute: str      # OrderComponents attribute
    abi_type: str       # "address" | "uint256" | "bytes32"
    width: int          # declared width in bytes


def _slot(name: str, attribute: str, abi_type: str) -> FieldSlot:
    width = ADDRESS_BYTES if abi_type == "address" else WORD_BYTES
    return FieldSlot(name, attribute, abi_type, width)


ORDER_COMPONENTS_LAYOUT: Tuple[FieldSlot, ...] = (
    _slot("offerer", "offerer", "address"),
    _slot("token", "token", "address"),
    _slot("identifier", "identifier", "uint256"),
    _slot("currency", "currency", "address"),
    _slot("artist", "artist", "address"),
    _slot("platform", "platform", "address"),
    _slot("startTime", "start_time", "uint256"),
    _slot("endTime", "end_time", "uint256"),
    _slot("duration", "duration", "uint256"),
    _slot("periods", "periods", "uint256"),
    _slot("amount", "amount", "uint256"),
    _slot("ratio", "ratio", "uint256"),
    _slot("royalty", "royalty", "uint256"),
    _slot("fee", "fee", "uint256"),
    _slot("withdrawFee", "withdraw_fee", "uint256"),
    _slot("salt", "salt", "uint256"),
    _slot("conduitKey", "conduit_key", "bytes32"),
    _slot("counter", "counter", "uint256"),
)

ORDER_TYPE_STRING = "OrderComponents({})".format(
    ",".join(f"{slot.abi_type} {slot.name}" for slot in ORDER_COMPONENTS_LAYOUT)
)

PREIMAGE_BYTES = WORD_BYTES * (len(ORDER_COMPONENTS_LAYOUT) + 1)


def field_offset(index: int) -> int:
    """Byte offset of layout field `index` inside the preimage."""
    return WORD_BYTES * (index + 1)


@lru_cache(maxsize=1)
def order_type_hash() -> bytes:
    return keccak(ORDER_TYPE_STRING.encode("utf-8"))


def order_hash_preimage(components: OrderComponents) -> bytes:
    """
    Build the fixed-size preimage.
    Every field is encoded before anything is returned; an EncodingError on
    any field aborts the whole derivation.
    """
    buffer = bytearray(PREIMAGE_BYTES)
    buffer[0:WORD_BYTES] = order_type_hash()

    for index, slot in enumerate(ORDER_COMPONENTS_LAYOUT):
        word = to_word(getattr(components, slot.attribute), slot.width)
        offset = field_offset(index)
        buffer[offset:offset + WORD_BYTES] = word

    return bytes(buffer)


def derive_order_hash(components: OrderComponents) -> str:
    """
    Return the 0x-prefixed 32-byte order hash.

    Raises:
        EncodingError: A field does not fit its declared width.
        MalformedNumeral: A field is not a valid numeral or hex string.
    """
    preimage = order_hash_preimage(components)
    order_hash = "0x" + keccak(preimage).hex()
    logger.debug("order_hash_derived", order_hash=order_hash, offerer=components.offerer)
    return order_hash


calculate_order_hash = derive_order_hash
