"""Settings of the USART2 serial port and the pins it is routed to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Parity(Enum):
    NONE = "none"
    EVEN = "even"
    ODD = "odd"


class StopBits(Enum):
    HALF = 0.5
    ONE = 1.0
    ONE_AND_HALF = 1.5
    TWO = 2.0


class UartMode(Enum):
    RX = "rx"
    TX = "tx"
    TX_RX = "tx_rx"


_WORD_LENGTHS = (7, 8, 9)
_OVERSAMPLING = (8, 16)


@dataclass(frozen=True)
class UartConfig:
    """Line settings of a UART; word length counts the parity bit, if any."""

    instance: str = "USART2"
    baud_rate: int = 115200
    word_length: int = 8
    stop_bits: StopBits = StopBits.ONE
    parity: Parity = Parity.NONE
    mode: UartMode = UartMode.TX_RX
    hw_flow_control: bool = False
    oversampling: int = 16
    one_bit_sampling: bool = False
    clock_source: str = "PCLK1"

    def __post_init__(self) -> None:
        if self.baud_rate <= 0:
            raise ValueError("baud rate must be positive")
        if self.word_length not in _WORD_LENGTHS:
            raise ValueError(f"word length must be one of {_WORD_LENGTHS}")
        if self.oversampling not in _OVERSAMPLING:
            raise ValueError(f"oversampling must be one of {_OVERSAMPLING}")

    def frame_bits(self) -> float:
        """Bits on the line per character: start bit, data/parity and stop bits."""
        return 1 + self.word_length + self.stop_bits.value


@dataclass(frozen=True)
class PinConfig:
    """A GPIO pin set to an alternate function."""

    port: str
    pin: int
    signal: str
    alternate: int
    push_pull: bool = True
    pull: str | None = None
    speed: str = "very_high"

    @property
    def name(self) -> str:
        return f"P{self.port[-1]}{self.pin}"


def usart2_config() -> UartConfig:
    """USART2 at 115200 baud, 8 data bits, no parity, one stop bit."""
    return UartConfig()


def usart2_pins() -> tuple[PinConfig, PinConfig]:
    """USART2 is routed to PA2 (TX) and PA3 (RX) on alternate function 7."""
    return (
        PinConfig(port="GPIOA", pin=2, signal="USART2_TX", alternate=7),
        PinConfig(port="GPIOA", pin=3, signal="USART2_RX", alternate=7),
    )