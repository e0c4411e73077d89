"""Sequential execution of resolved step invocations.

Each invocation runs synchronously, in order, through an injected
:class:`~talos.core.protocols.ProcessRunner`.  A failing step is recorded
as a failed :class:`~talos.core.models.StepOutcome` and the sequencer
moves on to the next one: there is no short-circuit, no retry and no
rollback.  Callers inspect the returned :class:`~talos.core.models.RunReport`
instead of catching per-step errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from talos.core.models import ResolvedInvocation, RunReport, StepOutcome
from talos.core.protocols import ExecutionReporter, ProcessRunner
from talos.exceptions import StepExecutionError

logger = logging.getLogger(__name__)


class ExecutionSequencer:
    """Runs invocations one after another with per-step failure isolation.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    reporter:
        Optional :class:`ExecutionReporter` notified before each step and
        after its outcome is known.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        reporter: ExecutionReporter | None = None,
    ) -> None:
        self._runner: ProcessRunner = runner
        self._reporter: ExecutionReporter | None = reporter

    def run(self, invocations: Iterable[ResolvedInvocation]) -> RunReport:
        """Run every invocation of *invocations* and collect the outcomes.

        *invocations* is consumed lazily, so a generator that prompts per
        step only prompts once the previous step has finished.
        """
        outcomes: list[StepOutcome] = []
        for invocation in invocations:
            outcomes.append(self._run_one(invocation))
        return RunReport(outcomes=tuple(outcomes))

    def _run_one(self, invocation: ResolvedInvocation) -> StepOutcome:
        if self._reporter is not None:
            self._reporter.on_start(invocation)

        logger.debug("Running step %r: %s", invocation.step_name, invocation.command_line)
        try:
            self._invoke(invocation)
        except StepExecutionError as exc:
            outcome = StepOutcome(
                step_name=invocation.step_name,
                command_line=invocation.command_line,
                succeeded=False,
                message=str(exc),
            )
            logger.debug("Step %r failed: %s", invocation.step_name, exc)
            if self._reporter is not None:
                self._reporter.on_failure(outcome)
            return outcome

        outcome = StepOutcome(
            step_name=invocation.step_name,
            command_line=invocation.command_line,
            succeeded=True,
        )
        if self._reporter is not None:
            self._reporter.on_success(outcome)
        return outcome

    def _invoke(self, invocation: ResolvedInvocation) -> None:
        """Call the runner and ensure only :class:`StepExecutionError` escapes."""
        try:
            self._runner.run(invocation.action, invocation.argv)
        except StepExecutionError:
            raise
        except Exception as exc:
            raise StepExecutionError(f"Unexpected runner error: {exc}") from exc
