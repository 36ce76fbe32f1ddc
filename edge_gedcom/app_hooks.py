from typing import Optional, Protocol

class AppHooks(Protocol):
    """
    Protocol for application hooks to follow a conversion run.
    This can be implemented by the main application to show progress
    while the report pages are read and the GEDCOM records are built.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report progress of the current step.
        update_key_value(key, value) -> None:
            Report a status value, e.g. the number of people read.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the conversion.

        Args:
            info (str): Progress message.
            target (Optional[int]): Number of items expected in this step, if known.
            reset_counter (bool): Start counting a new step.
            plus_step (int): Items completed since the last report.
        """
        pass

    def update_key_value(self, key: str, value) -> None:
        """
        Report a status update with a key-value pair.

        Args:
            key (str): Status key.
            value: Status value.
        """
        pass
