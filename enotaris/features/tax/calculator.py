"""Transfer tax estimates for a property transaction (jual beli tanah/bangunan).

Rates are the common defaults; NPOPTKP differs per region, so callers can
override it. Amounts are in Rupiah.
"""

import math
import re

from pydantic import BaseModel, ConfigDict, Field

NPOPTKP_DEFAULT = 60_000_000
TARIF_BPHTB = 0.05
TARIF_PPH_FINAL = 0.025
TARIF_PBB_NJKP = 0.2  # share of NJOP taxed as NJKP
TARIF_PBB = 0.005

_THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")
_NON_DIGIT_RE = re.compile(r"\D")
_SPACE_RE = re.compile(r"\s")


class TaxEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    bphtb: float = Field(0.0, description="5% of NPOP above NPOPTKP, never negative")
    pph_final: float = Field(0.0, description="2.5% final income tax on the transfer")
    pbb_tahunan: float = Field(0.0, description="Annual PBB estimate; not part of total")
    total: float = Field(0.0, description="bphtb + pph_final")


def estimate_taxes(nilai_transaksi: float, npoptkp: float = NPOPTKP_DEFAULT) -> TaxEstimate:
    """Estimate BPHTB, PPh final and annual PBB for a transaction value (NPOP/NJOP).

    A value of zero or less yields an all-zero estimate.
    """
    if nilai_transaksi <= 0:
        return TaxEstimate()
    bphtb = max(0.0, (nilai_transaksi - npoptkp) * TARIF_BPHTB)
    pph_final = nilai_transaksi * TARIF_PPH_FINAL
    pbb = nilai_transaksi * TARIF_PBB_NJKP * TARIF_PBB
    return TaxEstimate(bphtb=bphtb, pph_final=pph_final, pbb_tahunan=pbb, total=bphtb + pph_final)


def _group(digits: str) -> str:
    return _THOUSANDS_RE.sub(".", digits)


def parse_numeric_input(value: str) -> float:
    """Parse an Indonesian-formatted amount: ``.`` groups thousands, ``,`` starts decimals.

    "500.000.000,50" -> 500000000.5. At most two decimals are kept; anything
    without digits reads as 0.
    """
    text = _SPACE_RE.sub("", value or "")
    int_part, _, dec_part = text.partition(",")
    int_digits = _NON_DIGIT_RE.sub("", int_part)
    dec_digits = _NON_DIGIT_RE.sub("", dec_part)[:2]
    if not int_digits and not dec_digits:
        return 0.0
    return float(f"{int_digits or '0'}.{dec_digits}" if dec_digits else int_digits)


def format_number_for_input(n: float) -> str:
    """``1234567.5`` -> ``"1.234.567,50"``; zero (or NaN) renders empty."""
    if math.isnan(n) or n == 0:
        return ""
    cents = math.floor(abs(n) * 100 + 0.5)
    whole, frac = divmod(cents, 100)
    out = _group(str(whole))
    if n % 1 != 0:
        out += f",{frac:02d}"
    return ("-" if n < 0 else "") + out


def format_input_live(value: str) -> str:
    """Reformat a partially typed amount, keeping a trailing comma the user just typed."""
    text = _SPACE_RE.sub("", value or "")
    trailing_comma = text.endswith(",")
    int_part, _, dec_part = text.partition(",")
    int_digits = _NON_DIGIT_RE.sub("", int_part)
    if len(int_digits) > 1:
        int_digits = int_digits.lstrip("0") or "0"
    dec_digits = _NON_DIGIT_RE.sub("", dec_part)[:2]
    grouped = _group(int_digits) if int_digits else ""
    if not grouped and not dec_digits and not trailing_comma:
        return ""
    return f"{grouped},{dec_digits}" if dec_digits or trailing_comma else grouped


def format_rupiah(n: float) -> str:
    """Whole-Rupiah display, halves rounded away from zero: ``Rp 22.000.000``."""
    whole = math.floor(abs(n) + 0.5)
    return ("-" if n < 0 and whole else "") + "Rp " + _group(str(whole))
