"""Human-readable file sizes."""

_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def format_file_size(size: int) -> str:
    """Format a byte count with binary (1024) units and two decimals."""
    if size == 0:
        return "0 B"
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(_UNITS) - 1:
        value /= 1024
        unit_index += 1
    if unit_index == 0:
        return f"{size} B"
    return f"{value:.2f} {_UNITS[unit_index]}"