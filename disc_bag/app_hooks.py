from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks.
    This can be implemented by the host application to follow the
    progress of statistics collection.

    Methods:
        report_step(info: str, target: int, reset_counter: bool, plus_step: int) -> None:
            Report a progress step.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report progress messages from the statistics pipeline.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass
