KIB = 1024
MIB = 1024 * 1024


def format_bytes(size: int) -> str:
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size // KIB} KB"
    return f"{size // MIB} MB"
