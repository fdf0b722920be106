from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence

from .options import Options
from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallCtx:
    options: Options
    settings: Settings

    @property
    def dry_run(self) -> bool:
        return self.options.dry_run


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallCtx,
    steps: Sequence[Step],
    state: Dict[str, Any] | None = None,
) -> PipelineResult:
    """Run steps in order; the first error aborts the remaining steps."""

    state = {} if state is None else state
    ran: List[str] = []

    for step in steps:
        logger.info("Running step %s", step.step_id)
        state = step.run(ctx, state)
        ran.append(step.step_id)

    return PipelineResult(state=state, ran_steps=ran)
