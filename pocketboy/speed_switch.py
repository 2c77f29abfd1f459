"""Color-model double-speed switch and its KEY1 register."""

from dataclasses import dataclass

from pocketboy.bits import is_bit_set

_ARMED_BIT = 0


@dataclass
class SpeedSwitch:
    """CPU speed state; only meaningful on color hardware."""

    cgb_double_speed: bool = False
    armed: bool = False

    def read_key1(self, cgb: bool) -> int:
        """Return the KEY1 register, or 0xFF outside color mode."""
        if not cgb:
            return 0xFF
        return (int(self.cgb_double_speed) << 7) | int(self.armed)

    def write_key1(self, cgb: bool, value: int) -> None:
        """Arm or disarm the speed switch from a KEY1 write."""
        if cgb:
            self.armed = is_bit_set(value, _ARMED_BIT)

    def toggle(self, cgb: bool) -> None:
        """Flip the CPU speed if the switch has been armed."""
        if cgb and self.armed:
            self.armed = False
            self.cgb_double_speed = not self.cgb_double_speed