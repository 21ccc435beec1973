"""Quote repository implementation."""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.interfaces.repositories import QuoteRepositoryInterface
from forge.domain.entities.quote import Quote
from forge.domain.value_objects.quote_tier import TierOption
from forge.infrastructure.database.models.quote import QuoteModel


class QuoteRepository(QuoteRepositoryInterface):
    """Quote repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, quote: Quote) -> Quote:
        """Create a new quote."""
        quote_model = QuoteModel(
            id=quote.id,
            job_id=quote.job_id,
            plumber_id=quote.plumber_id,
            good_title=quote.good.title,
            good_description=quote.good.description,
            good_price=quote.good.price,
            better_title=quote.better.title,
            better_description=quote.better.description,
            better_price=quote.better.price,
            best_title=quote.best.title,
            best_description=quote.best.description,
            best_price=quote.best.price,
            selected_tier=quote.selected_tier,
            status=quote.status,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )

        self.db.add(quote_model)
        await self.db.flush()
        await self.db.refresh(quote_model)

        return quote_model_to_entity(quote_model)

    async def get_by_job_id(self, job_id: UUID) -> List[Quote]:
        """Get all quotes for a job."""
        stmt = (
            select(QuoteModel)
            .where(QuoteModel.job_id == job_id)
            .order_by(QuoteModel.created_at)
        )
        result = await self.db.execute(stmt)
        return [quote_model_to_entity(model) for model in result.scalars().all()]


def quote_model_to_entity(model: QuoteModel) -> Quote:
    """Convert SQLAlchemy model to domain entity."""
    return Quote(
        id=model.id,
        job_id=model.job_id,
        plumber_id=model.plumber_id,
        good=TierOption(
            title=model.good_title,
            description=model.good_description,
            price=model.good_price,
        ),
        better=TierOption(
            title=model.better_title,
            description=model.better_description,
            price=model.better_price,
        ),
        best=TierOption(
            title=model.best_title,
            description=model.best_description,
            price=model.best_price,
        ),
        selected_tier=model.selected_tier,
        status=model.status,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
