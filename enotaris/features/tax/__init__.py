from enotaris.features.tax.calculator import (
    NPOPTKP_DEFAULT,
    TaxEstimate,
    estimate_taxes,
    format_input_live,
    format_number_for_input,
    format_rupiah,
    parse_numeric_input,
)

__all__ = [
    "NPOPTKP_DEFAULT",
    "TaxEstimate",
    "estimate_taxes",
    "format_input_live",
    "format_number_for_input",
    "format_rupiah",
    "parse_numeric_input",
]
