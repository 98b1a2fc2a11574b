from typing import Dict, List, Sequence, Tuple, Union

from hwspec.kernel.contracts import CommandResult, CommandRunner, HostSampler, HostSnapshot


class MockCommandRunner(CommandRunner):
    """
    A scripted CommandRunner for testing.

    Commands are matched by their full argv. Anything not scripted behaves
    like a binary that is not installed.
    """
    def __init__(self):
        self._responses: Dict[Tuple[str, ...], Union[CommandResult, OSError]] = {}
        self.calls: List[Tuple[str, ...]] = []

    def set_output(self, args: Sequence[str], stdout: str, returncode: int = 0, stderr: str = "") -> "MockCommandRunner":
        args = tuple(args)
        self._responses[args] = CommandResult(args=args, returncode=returncode, stdout=stdout, stderr=stderr)
        return self

    def set_missing(self, args: Sequence[str]) -> "MockCommandRunner":
        args = tuple(args)
        self._responses[args] = FileNotFoundError(2, "No such file or directory", args[0])
        return self

    def run(self, args: Sequence[str]) -> CommandResult:
        args = tuple(args)
        self.calls.append(args)
        response = self._responses.get(args)
        if response is None:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if isinstance(response, OSError):
            raise response
        return response

    def called(self, args: Sequence[str]) -> int:
        return self.calls.count(tuple(args))


class FixedHostSampler(HostSampler):
    """Returns the same snapshot on every call and counts the calls."""
    def __init__(self, snapshot: HostSnapshot):
        self.snapshot = snapshot
        self.sample_calls = 0

    def sample(self) -> HostSnapshot:
        self.sample_calls += 1
        return self.snapshot
