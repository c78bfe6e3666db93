__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "config",
    "context",
    "errors",
    "exit_codes",
    "formatter",
    "generators",
    "logging",
    "naming",
    "normalize",
    "pipeline",
    "resolver",
]
