"""
orderhash Encoding Package

Canonical encoding and struct-hash derivation for verifier-compatible orders.
"""
from .numeral import Numeral, NumeralKind, parse_numeral
from .scalar import to_hex, to_bn, to_address, to_key, to_word
from .random_source import (
    RandomByteSource,
    SecureByteSource,
    SeededByteSource,
    byte_source_from_config,
)
from .signature import SignatureParts, compact_signature, split_signature
from .order_hash import (
    ORDER_TYPE_STRING,
    ORDER_COMPONENTS_LAYOUT,
    calculate_order_hash,
    derive_order_hash,
    order_hash_preimage,
    order_type_hash,
)
from .gas import GasSchedule, execution_gas, intrinsic_gas
from .builders import (
    build_order,
    build_order_status,
    build_resolver,
    to_fulfillment,
    to_fulfillment_components,
)

__all__ = [
    "Numeral",
    "NumeralKind",
    "parse_numeral",
    "to_hex",
    "to_bn",
    "to_address",
    "to_key",
    "to_word",
    "RandomByteSource",
    "SecureByteSource",
    "SeededByteSource",
    "byte_source_from_config",
    "SignatureParts",
    "compact_signature",
    "split_signature",
    "ORDER_TYPE_STRING",
    "ORDER_COMPONENTS_LAYOUT",
    "calculate_order_hash",
    "derive_order_hash",
    "order_hash_preimage",
    "order_type_hash",
    "GasSchedule",
    "execution_gas",
    "intrinsic_gas",
    "build_order",
    "build_order_status",
    "build_resolver",
    "to_fulfillment",
    "to_fulfillment_components",
]
