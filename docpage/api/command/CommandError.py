"""Error raised when a required external command cannot run or fails."""


class CommandError(RuntimeError):
    """External command failure."""

    def __init__(self, args: list[str], message: str):
        self.command = list(args)
        super().__init__(f"{' '.join(args)}: {message}")
