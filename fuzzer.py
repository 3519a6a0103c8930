import sys
from typing import List, Optional, Sequence

from harness import ExecutionResult, TargetNotFoundError, build_command, resolve_command, run_input
from mutators import HTML_MUTATORS, Mutator, mutate
from utils import describe_exit_code, env_str, env_timeout, printable

WORKING_DIRECTORY = "./"
DEFAULT_SEED = "<html></html>"
ATTRIBUTE_SEED = '<html a="value">...</html>'
SEEDS = {"html": DEFAULT_SEED, "attribute": ATTRIBUTE_SEED}
# None blocks on a hung target for as long as it takes
EXEC_TIMEOUT = None

USAGE = 'Usage: python3 fuzzer.py "<command_to_fuzz>"'


class Fuzzer:
    def __init__(
        self,
        command: str,
        seed: str = DEFAULT_SEED,
        mutators: Sequence[Mutator] = HTML_MUTATORS,
        working_dir: str = WORKING_DIRECTORY,
        exec_timeout: Optional[float] = EXEC_TIMEOUT,
    ):
        self.command = resolve_command(command, working_dir)
        self.argv = build_command(self.command)
        self.seed = seed
        self.mutators = list(mutators)
        self.working_dir = working_dir
        self.exec_timeout = exec_timeout
        self.results: List[ExecutionResult] = []

    def test_cases(self) -> List[str]:
        return [self.seed] + mutate(self.seed, self.mutators)

    def run(self) -> bool:
        """Run the target once per test case and return True iff all of them passed."""
        print(f"[*] Command: {self.argv}", flush=True)
        self.results = []
        for data in self.test_cases():
            print(f"[*] Testing input: {printable(data)}", flush=True)
            result = run_input(self.argv, data, self.working_dir, timeout=self.exec_timeout)
            self.results.append(result)
            self._report(result)

        passed = sum(1 for r in self.results if r.passed)
        print(f"[*] Finished fuzzing {self.command}. passed={passed}/{len(self.results)}", flush=True)
        return passed == len(self.results)

    def _report(self, result: ExecutionResult):
        if result.error is not None and result.exit_code is None:
            print(f"[!] Error while testing input: {result.error}", file=sys.stderr, flush=True)
            print(flush=True)
            return
        print(f"Output: {result.output.strip()}", flush=True)
        print(f"Exit Code: {describe_exit_code(result.exit_code)}\n", flush=True)
        if result.error is not None:
            print(f"[!] Error: {result.error}", file=sys.stderr, flush=True)
        elif result.exit_code != 0:
            print("[!] Error: Program exited with a non-zero exit code.", file=sys.stderr, flush=True)


def select_seed() -> str:
    """FUZZER_SEED gives the seed text directly, otherwise FUZZER_SEED_NAME picks a built-in one."""
    text = env_str("FUZZER_SEED", "")
    if text:
        return text
    name = env_str("FUZZER_SEED_NAME", "html")
    if name not in SEEDS:
        raise ValueError(f"FUZZER_SEED_NAME must be one of {sorted(SEEDS)}, got {name!r}")
    return SEEDS[name]


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        seed = select_seed()
        timeout = env_timeout("FUZZER_TIMEOUT", EXEC_TIMEOUT)
        fuzzer = Fuzzer(args[0], seed=seed, exec_timeout=timeout)
    except (TargetNotFoundError, ValueError) as e:
        print(f"[!] FATAL ERROR: {e}", file=sys.stderr)
        return 1

    return 0 if fuzzer.run() else 1


if __name__ == "__main__":
    sys.exit(main())
