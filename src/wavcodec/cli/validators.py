from wavcodec.format.types import Bits


def validate_bit_depth(type_: object, bits: int | None) -> None:
    """Validate that bits is a supported bits-per-sample value."""
    if bits is None:
        return

    if Bits.from_bits(bits) is None:
        supported = ", ".join(str(b.value) for b in Bits)
        raise ValueError(f"Bit depth must be one of {supported}")


def validate_positive_integer(type_: object, value: int | None) -> None:
    if value is None:
        return

    if value <= 0:
        raise ValueError("Value must be a positive integer")
