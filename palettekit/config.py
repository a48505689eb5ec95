"""
palettekit Configuration
Manages environment variables and defaults for extraction and palette derivation.
"""
import os


class Config:
    """Configuration class for palettekit."""

    # Extraction
    DISTINCT_THRESHOLD: float = float(os.environ.get("PALETTEKIT_DISTINCT_THRESHOLD", "100"))
    EXTRACTION_WORKERS: int = int(os.environ.get("PALETTEKIT_EXTRACTION_WORKERS", "1"))

    # Parsing policy: 0 keeps the zero-color fallback for malformed hex
    STRICT_HEX: bool = bool(int(os.environ.get("PALETTEKIT_STRICT_HEX", "0")))

    # Shade ladder defaults
    DEFAULT_SHADES: int = int(os.environ.get("PALETTEKIT_DEFAULT_SHADES", "5"))
    DEFAULT_SHADE_STRENGTH: float = float(os.environ.get("PALETTEKIT_DEFAULT_SHADE_STRENGTH", "0.2"))

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("PALETTEKIT_METRICS_ENABLED", "1")))

    # Pixel sources
    SUPPORTED_BIT_DEPTHS = (8, 16)

    @classmethod
    def validate_threshold(cls, threshold: float) -> bool:
        """Validate distinctness threshold."""
        return threshold >= 0

    @classmethod
    def validate_workers(cls, workers: int) -> bool:
        """Validate extraction worker count."""
        return 1 <= workers <= 64

    @classmethod
    def validate_bit_depth(cls, bit_depth: int) -> bool:
        """Validate pixel source channel depth."""
        return bit_depth in cls.SUPPORTED_BIT_DEPTHS


# Global config instance
config = Config()
