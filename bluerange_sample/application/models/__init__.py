from .outcome import ApiFailure, LocalFailure, RunOutcome, Success

__all__ = ["ApiFailure", "LocalFailure", "RunOutcome", "Success"]
