"""
Punycode conversion for domain labels.

Labels are converted one at a time with the idna library. Unicode labels
are first mapped with UTS #46 (case folding, width and compatibility
mapping), then encoded as IDNA2008 A-labels. Labels IDNA2008 disallows,
such as symbols and emoji, still have a well-defined RFC 3492 Punycode
form and are encoded with the plain codec instead of being rejected.
ASCII labels pass through untouched in both directions, so hostnames
containing characters IDNA would reject (underscores in service records,
for instance) survive a round trip.
"""

import idna

from .enums import DomainErrorCode
from .exceptions import DecodingError, EncodingError
from .suffix_registry import ACE_PREFIX


def _remap(label: str) -> str:
    try:
        return idna.uts46_remap(label, std3_rules=False, transitional=False)
    except idna.IDNAError:
        return label.lower()


def encode_label(label: str) -> str:
    """
    Convert a single label to its ASCII-compatible form.

    Args:
        label: Domain label, e.g. 'München'

    Returns:
        The label unchanged if ASCII, otherwise 'xn--' + Punycode of the
        UTS #46 mapped label ('xn--mnchen-3ya')

    Raises:
        EncodingError: If the label does not map to one non-empty label
    """
    if label.isascii():
        return label

    mapped = _remap(label)
    # Mapping can empty a label or turn an ideographic full stop into a dot
    if not mapped or "." in mapped:
        raise EncodingError(
            code=DomainErrorCode.ENCODING_ERROR.value,
            message=f"Failed to convert to Punycode: '{label}' does not map to a single label",
            details={"label": label},
        )

    try:
        return idna.alabel(mapped).decode("ascii")
    except idna.IDNAError:
        pass

    # Disallowed under IDNA2008 but valid RFC 3492 input
    try:
        return ACE_PREFIX + mapped.encode("punycode").decode("ascii")
    except UnicodeError as e:
        raise EncodingError(
            code=DomainErrorCode.ENCODING_ERROR.value,
            message=f"Failed to convert to Punycode: {e}",
            details={"label": label, "mapped": mapped},
        )


def decode_label(label: str) -> str:
    """
    Convert a single 'xn--' label back to Unicode.

    Args:
        label: Domain label, e.g. 'xn--mnchen-3ya'

    Returns:
        The decoded Unicode label, or the label unchanged if not Punycode

    Raises:
        DecodingError: If the Punycode payload is malformed
    """
    if not label.lower().startswith(ACE_PREFIX):
        return label

    try:
        return idna.ulabel(label)
    except (idna.IDNAError, UnicodeError):
        pass

    payload = label[len(ACE_PREFIX):].lower()
    try:
        decoded = payload.encode("ascii").decode("punycode")
    except (UnicodeError, ValueError) as e:
        raise DecodingError(
            code=DomainErrorCode.DECODING_ERROR.value,
            message=f"Failed to convert from Punycode: {e}",
            details={"label": label},
        )

    if not decoded or "." in decoded:
        raise DecodingError(
            code=DomainErrorCode.DECODING_ERROR.value,
            message="Failed to convert from Punycode: payload does not decode to a single label",
            details={"label": label},
        )

    return decoded


def to_punycode(domain: str) -> str:
    """Encode every dot-separated label of a domain."""
    return ".".join(encode_label(label) for label in domain.split("."))


def from_punycode(domain: str) -> str:
    """Decode every dot-separated label of a domain."""
    return ".".join(decode_label(label) for label in domain.split("."))


def has_punycode_label(domain: str) -> bool:
    """Check whether any label of the domain is ASCII-compatible encoded."""
    return any(label.lower().startswith(ACE_PREFIX) for label in domain.split("."))
