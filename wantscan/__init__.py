"""Record-store barcode scanner for a buying service's wants list."""
__version__ = "1.0.0"
