from .core import TERMINAL_MAX_ATTEMPTS, run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["TERMINAL_MAX_ATTEMPTS", "run_case", "run_batch", "write_csv", "write_manifest"]
