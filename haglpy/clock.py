"""Core clock (HCLK) frequency worked out from RCC register values."""

from __future__ import annotations

from dataclasses import dataclass

RESET_CORE_CLOCK = 4_000_000
"""Core clock right after reset: MSI at 4 MHz."""

MSI_RANGE_TABLE = (
    100_000, 200_000, 400_000, 800_000, 1_000_000, 2_000_000,
    4_000_000, 8_000_000, 16_000_000, 24_000_000, 32_000_000, 48_000_000,
)
AHB_PRESCALER_SHIFTS = (0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 3, 4, 6, 7, 8, 9)
APB_PRESCALER_SHIFTS = (0, 0, 0, 0, 1, 2, 3, 4)

_CR_MSIRGSEL = 1 << 3
_CR_MSIRANGE = 0xF << 4
_CSR_MSISRANGE = 0xF << 8
_CFGR_SWS = 0x3 << 2
_CFGR_HPRE = 0xF << 4
_PLLCFGR_PLLSRC = 0x3
_PLLCFGR_PLLM = 0x7 << 4
_PLLCFGR_PLLN = 0x7F << 8
_PLLCFGR_PLLR = 0x3 << 25

_SWS_MSI = 0x00
_SWS_HSI = 0x04
_SWS_HSE = 0x08
_SWS_PLL = 0x0C

_PLLSRC_HSI = 0x02
_PLLSRC_HSE = 0x03


@dataclass(frozen=True)
class ClockConfig:
    """Oscillator frequencies in Hz assumed by the clock calculation."""

    hse_value: int = 8_000_000
    hsi_value: int = 16_000_000


@dataclass(frozen=True)
class RccRegisters:
    """Snapshot of the RCC registers that decide the core clock.

    The defaults select MSI range 6 (4 MHz) in both CR and CSR, with MSI
    as system clock and no AHB prescaling.
    """

    cr: int = 0x0000_0060
    csr: int = 0x0000_0600
    cfgr: int = 0x0000_0000
    pllcfgr: int = 0x0000_0000


def msi_frequency(regs: RccRegisters) -> int:
    """Return the MSI frequency in Hz for the range selected in the registers."""
    if regs.cr & _CR_MSIRGSEL:
        index = (regs.cr & _CR_MSIRANGE) >> 4
    else:
        index = (regs.csr & _CSR_MSISRANGE) >> 8
    if index >= len(MSI_RANGE_TABLE):
        raise ValueError(f"reserved MSI range {index}")
    return MSI_RANGE_TABLE[index]


def _pll_output(regs: RccRegisters, config: ClockConfig, msi: int) -> int:
    source = regs.pllcfgr & _PLLCFGR_PLLSRC
    pllm = ((regs.pllcfgr & _PLLCFGR_PLLM) >> 4) + 1
    if source == _PLLSRC_HSI:
        vco = config.hsi_value // pllm
    elif source == _PLLSRC_HSE:
        vco = config.hse_value // pllm
    else:
        vco = msi // pllm
    vco *= (regs.pllcfgr & _PLLCFGR_PLLN) >> 8
    pllr = (((regs.pllcfgr & _PLLCFGR_PLLR) >> 25) + 1) * 2
    return vco // pllr


def system_core_clock(regs: RccRegisters, config: ClockConfig | None = None) -> int:
    """Return the core clock (HCLK) in Hz derived from the RCC registers."""
    config = config or ClockConfig()
    msi = msi_frequency(regs)

    source = regs.cfgr & _CFGR_SWS
    if source == _SWS_HSI:
        sysclk = config.hsi_value
    elif source == _SWS_HSE:
        sysclk = config.hse_value
    elif source == _SWS_PLL:
        sysclk = _pll_output(regs, config, msi)
    else:
        sysclk = msi

    shift = AHB_PRESCALER_SHIFTS[(regs.cfgr & _CFGR_HPRE) >> 4]
    return sysclk >> shift