from .shell import run_shell

__all__ = [
    "run_shell",
]
