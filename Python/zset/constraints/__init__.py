from .checker import check_delimiter_balance, check_nesting_order, check_delimiter_counts

__all__ = ["check_delimiter_balance", "check_nesting_order", "check_delimiter_counts"]
