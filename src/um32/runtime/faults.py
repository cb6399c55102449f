from um32.runtime.decode import Snapshot


class Fault(Exception):
    """Fatal violation of an operation's precondition."""

    snapshot: Snapshot | None = None

    def attach(self, snapshot: Snapshot):
        if self.snapshot is None:
            self.snapshot = snapshot

    @property
    def kind(self) -> str:
        return type(self).__name__

    def report(self) -> str:
        message = f'{self.kind}: {self}'

        if self.snapshot is not None:
            message += f'\n{self.snapshot}'

        return message


class InvalidProgramSize(Fault):
    pass


class OutOfBounds(Fault):
    pass


class InvalidArrayReference(Fault):
    pass


class InvalidAbandon(Fault):
    pass


class DivisionByZero(Fault):
    pass


class UnknownOpcode(Fault):
    pass


class IOContractViolation(Fault):
    pass
