from .checks import sheet_violations, validate_matrix

__all__ = ["sheet_violations", "validate_matrix"]
