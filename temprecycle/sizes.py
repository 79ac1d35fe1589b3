"""Human-readable byte sizes."""

SUFFIXES = ("B", "KB", "MB", "GB", "TB")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with two decimals and a binary-scaled unit."""
    if num_bytes < 0:
        raise ValueError("byte count cannot be negative")
    size = float(num_bytes)
    index = 0
    while size >= 1024 and index < len(SUFFIXES) - 1:
        size /= 1024
        index += 1
    return f"{size:.2f} {SUFFIXES[index]}"