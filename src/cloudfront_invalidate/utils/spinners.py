"""Terminal spinners for slow AWS calls."""
from yaspin.core import Yaspin


class CallSpinner(Yaspin):
    """Marks the spinner line as done or failed when the block exits."""

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.ok(f"[✔] {self.text}")
        else:
            self.fail(f"[✘] {self.text}")
        super().__exit__(exc_type, exc_value, traceback)


def spinner(text: str = "", **kwargs) -> Yaspin:
    return CallSpinner(text=text, timer=True, **kwargs)
