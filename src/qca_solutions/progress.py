from __future__ import annotations


class ProgressNotices:
    """
    Prints human-readable progress notices while a consolidation runs.
    """

    def __init__(self, verbose: bool = True):
        self.verbose = bool(verbose)
        self.history: list[str] = []

    def notice(self, msg: str) -> None:
        if not self.verbose:
            return
        self.history.append(msg)
        print(msg, flush=True)

    def processing(self, solution_name: str) -> None:
        self.notice(f"Processing {solution_name} solution...")

    def saving(self, path: object) -> None:
        self.notice(f"Saving results to {path}")

    def done(self) -> None:
        self.notice("Done!")

    def messages(self) -> list[str]:
        """Return the notices emitted so far."""
        return list(self.history)
