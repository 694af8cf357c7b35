"""enotaris: client, view-model derivations and BFF for notary/PPAT case management."""

__version__ = "0.1.0"
