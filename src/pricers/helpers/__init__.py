#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Key decoding, scaling and hashing helpers used by the pricers."""

from __future__ import annotations

from pricers.helpers.encoding import (
    add_base64_padding,
    decode_base64,
    encode_websafe_base64,
    strip_base64_padding,
)
from pricers.helpers.hashing import (
    derive_iv,
    generate_pad,
    generate_signature,
    hmac_sum,
    signatures_match,
)
from pricers.helpers.keys import KeyDecodingMode, decode_key
from pricers.helpers.scale import (
    apply_scale_factor,
    from_micros,
    micros_from_bytes,
    micros_to_bytes,
    to_micros,
    validate_scale_factor,
)

__all__ = [
    "KeyDecodingMode",
    "add_base64_padding",
    "apply_scale_factor",
    "decode_base64",
    "decode_key",
    "derive_iv",
    "encode_websafe_base64",
    "from_micros",
    "generate_pad",
    "generate_signature",
    "hmac_sum",
    "micros_from_bytes",
    "micros_to_bytes",
    "signatures_match",
    "strip_base64_padding",
    "to_micros",
    "validate_scale_factor",
]

# 🌶️📦🔚
