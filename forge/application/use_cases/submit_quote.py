"""Submit quote use case."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict
from uuid import UUID

from forge.application.interfaces.repositories import (
    JobRepositoryInterface,
    QuoteRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.job import Job
from forge.domain.entities.quote import Quote
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from forge.domain.value_objects.quote_tier import QuoteTier, TierOption
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import QUOTES_SUBMITTED

logger = get_logger(__name__)

TITLE_MAX_LENGTH = 255


@dataclass
class SubmitQuoteRequest:
    """
    Request for quoting a job.

    ``tiers`` maps "good", "better" and "best" to dictionaries with
    title, description and price. Values arrive as sent by the client.
    """

    job_id: UUID
    plumber_id: UUID
    tiers: Dict[str, Any]


@dataclass
class SubmitQuoteResult:
    """Result of quote submission."""

    quote: Quote
    job: Job


class SubmitQuoteUseCase:
    """Use case for submitting a good/better/best quote on a requested job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        quote_repo: QuoteRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.quote_repo = quote_repo
        self.transaction_service = transaction_service

    async def execute(self, request: SubmitQuoteRequest) -> SubmitQuoteResult:
        """Create the quote and move the job to QUOTED in one transaction."""

        async def operation():
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("job", request.job_id)

            # State first: a closed job rejects any payload
            job.mark_quoted()

            options = {
                tier: self._parse_tier(request.tiers, tier) for tier in QuoteTier
            }
            quote = Quote(
                job_id=job.id,
                plumber_id=request.plumber_id,
                good=options[QuoteTier.GOOD],
                better=options[QuoteTier.BETTER],
                best=options[QuoteTier.BEST],
            )
            created_quote = await self.quote_repo.create(quote)
            updated_job = await self.job_repo.update(job)
            return created_quote, updated_job

        quote, job = await self.transaction_service.execute_in_transaction(operation)

        QUOTES_SUBMITTED.inc()
        logger.info(
            "Quote submitted",
            job_id=str(job.id),
            quote_id=str(quote.id),
            plumber_id=str(request.plumber_id),
        )

        return SubmitQuoteResult(quote=quote, job=job)

    def _parse_tier(self, tiers: Dict[str, Any], tier: QuoteTier) -> TierOption:
        key = tier.value.lower()
        data = (tiers or {}).get(key)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError(
                f"The {key} tier must be an object", reason="invalid_tier"
            )

        values = {}
        for field_name in ("title", "description", "price"):
            value = data.get(field_name)
            if value is None or not str(value).strip():
                raise RequiredFieldError(f"{key}.{field_name}")
            values[field_name] = value

        title = str(values["title"]).strip()
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title of the {key} tier exceeds {TITLE_MAX_LENGTH} characters",
                reason="invalid_tier",
            )

        try:
            price = Decimal(str(values["price"]))
        except InvalidOperation:
            raise ValidationError(
                f"Price of the {key} tier must be a number", reason="invalid_price"
            )
        if not price.is_finite() or price <= 0:
            raise ValidationError(
                f"Price of the {key} tier must be positive", reason="invalid_price"
            )

        return TierOption(
            title=title,
            description=str(values["description"]).strip(),
            price=price,
        )
