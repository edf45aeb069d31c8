"""Review aggregate: a customer's rating of a product."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront

MIN_RATING = 1
MAX_RATING = 5


@storefront.aggregate
class Review:
    """One review per (product, customer) pair."""

    product_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    rating: Integer(required=True, min_value=MIN_RATING, max_value=MAX_RATING)
    title: String(max_length=255, sanitize=False)
    body: Text(sanitize=False)
    created_at: DateTime()

    @classmethod
    def submit(cls, product_id, customer_id, rating, title=None, body=None):
        if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be a whole number between {MIN_RATING} and {MAX_RATING}"]})

        return cls(
            product_id=product_id,
            customer_id=customer_id,
            rating=rating,
            title=title,
            body=body,
            created_at=datetime.now(UTC),
        )
