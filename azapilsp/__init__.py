"""Language-server building blocks for azapi Terraform configurations."""

__version__ = "0.1.0"

__all__ = [
    "candidates",
    "code_actions",
    "diagnostics",
    "hover",
    "messages",
    "ranges",
    "resources",
    "session",
    "tokens",
]