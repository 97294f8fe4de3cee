"""Human-readable sizes and durations."""

KB = 1024
MB = KB * 1024
GB = MB * 1024


def format_file_size(size: int) -> str:
    if size >= GB:
        return f"{size / GB:.2f} GB"
    if size >= MB:
        return f"{size / MB:.2f} MB"
    if size >= KB:
        return f"{size / KB:.2f} KB"
    return f"{size} B"


def format_duration(seconds: float) -> str:
    """Format like ``1h 2m 3s``, ``2m 3s``, ``3s 40ms`` or ``40ms``."""
    total_ms = int(seconds * 1000)
    total_secs, millis = divmod(total_ms, 1000)
    hours, rem = divmod(total_secs, 3600)
    minutes, secs = divmod(rem, 60)

    if hours:
        return f"{hours}h {minutes}m {secs}s"
    if minutes:
        return f"{minutes}m {secs}s"
    if secs:
        return f"{secs}s {millis}ms"
    return f"{millis}ms"
