"""Bit and byte helpers shared by the emulator components."""

T_CYCLE_INCREMENT = 4


def is_bit_set(byte: int, bit_index: int) -> bool:
    """Return whether the bit at ``bit_index`` is set in ``byte``."""
    return (byte & (1 << bit_index)) > 0


def get_bit(byte: int, bit_index: int) -> int:
    """Return the bit at ``bit_index`` of ``byte`` as 0 or 1."""
    return (byte >> bit_index) & 1


def set_bit(byte: int, bit_index: int) -> int:
    """Return ``byte`` with the bit at ``bit_index`` set."""
    return (byte | (1 << bit_index)) & 0xFF


def reset_bit(byte: int, bit_index: int) -> int:
    """Return ``byte`` with the bit at ``bit_index`` cleared."""
    return byte & ~(1 << bit_index) & 0xFF


def as_word(low_byte: int, high_byte: int) -> int:
    """Combine two bytes into a 16-bit word."""
    return ((high_byte & 0xFF) << 8) | (low_byte & 0xFF)


def as_bytes(word: int) -> tuple[int, int]:
    """Split a 16-bit word into ``(low_byte, high_byte)``."""
    return word & 0xFF, (word >> 8) & 0xFF


def get_t_cycle_increment(double_speed_mode: bool) -> int:
    """Return the T-cycles per M-cycle for the current CPU speed."""
    return T_CYCLE_INCREMENT // 2 if double_speed_mode else T_CYCLE_INCREMENT