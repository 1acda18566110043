"""
Form-level submission: validate, build the batch, dispatch, aggregate.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import date

from core.errors import NetworkError, ProviderError, UnauthenticatedError, ValidationError
from core.validation import validate_submission
from models.events import (
    CredentialContext,
    DateSelection,
    EventRequest,
    EventResult,
    EventTemplate,
    SubmissionOutcome,
    SubmissionState,
)
from services.batch import build_batch

logger = logging.getLogger(__name__)

FAILURE_REASON = "Failed to create events"


async def _insert_one(provider, credentials: CredentialContext, request: EventRequest) -> EventResult:
    try:
        event_id = await provider.insert_event(credentials, request)
    except (ProviderError, NetworkError) as e:
        logger.warning("Event insert failed for %s: %s", request.date.isoformat(), e)
        return EventResult(date=request.date, ok=False, error=str(e))
    return EventResult(date=request.date, ok=True, event_id=event_id)


async def dispatch_batch(
    requests: Iterable[EventRequest],
    credentials: CredentialContext,
    provider,
) -> list[EventResult]:
    """
    Send every request concurrently and wait for all of them to settle.

    Provider and network failures are recorded per item; anything else
    propagates.
    """
    return list(
        await asyncio.gather(*(_insert_one(provider, credentials, request) for request in requests))
    )


class SubmissionOrchestrator:
    """
    Holds the date selection and outcome of the form.

    The selection is cleared only when every event is created; after a
    partial or total failure it is kept as-is so the user can resubmit.
    Already-created events are never rolled back.
    """

    def __init__(self, provider, selection: DateSelection | None = None):
        self.provider = provider
        self.selection = selection if selection is not None else DateSelection()
        self.outcome = SubmissionOutcome()

    @property
    def is_submitting(self) -> bool:
        return self.outcome.state is SubmissionState.IN_FLIGHT

    async def submit(self, template: EventTemplate, credentials: CredentialContext) -> SubmissionOutcome:
        """
        Create one event per selected date.

        Raises:
            UnauthenticatedError: no access token
            ValidationError: invalid template or empty selection (no calls made)
        """
        if not credentials.is_authenticated:
            raise UnauthenticatedError()
        if self.is_submitting:
            raise ValidationError(["A submission is already in progress"])

        errors = validate_submission(template, self.selection)
        if errors:
            self.outcome = SubmissionOutcome(state=SubmissionState.FAILED, reason=errors[0])
            raise ValidationError(errors)

        self.outcome = SubmissionOutcome(state=SubmissionState.IN_FLIGHT)
        logger.info(
            "Submitting %d events to %s (%s-%s %s)",
            len(self.selection),
            template.calendar_id,
            template.start_clock,
            template.end_clock,
            template.time_zone,
        )

        try:
            results = await dispatch_batch(
                build_batch(template, self.selection), credentials, self.provider
            )
        except Exception:
            self.outcome = SubmissionOutcome(state=SubmissionState.FAILED, reason=FAILURE_REASON)
            raise

        if all(result.ok for result in results):
            self.outcome = SubmissionOutcome(state=SubmissionState.SUCCEEDED, results=results)
            self.selection.clear()
        else:
            self.outcome = SubmissionOutcome(
                state=SubmissionState.FAILED, reason=FAILURE_REASON, results=results
            )
            logger.warning(
                "Submission failed: %d of %d events created",
                self.outcome.created,
                len(results),
            )
        return self.outcome


async def submit(
    template: EventTemplate,
    dates: Iterable[date],
    credentials: CredentialContext,
    provider,
) -> SubmissionOutcome:
    """Submit a template for the given dates with a one-off orchestrator."""
    selection = dates if isinstance(dates, DateSelection) else DateSelection(dates)
    return await SubmissionOrchestrator(provider, selection).submit(template, credentials)
