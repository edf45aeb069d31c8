"""Review submission and removal: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.identity.customer import Customer
from storefront.reviews.review import Review
from storefront.shared.queries import ensure_unique, require


@storefront.command(part_of="Review")
class SubmitReview:
    product_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String(max_length=255, sanitize=False)
    body: Text(sanitize=False)


@storefront.command(part_of="Review")
class DeleteReview:
    review_id: Identifier(required=True)


@storefront.command_handler(part_of=Review)
class ReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product = require(Product, command.product_id, field="product_id")
        customer = require(Customer, command.customer_id, field="customer_id")

        # One review per customer per product
        ensure_unique(Review, product_id=str(product.id), customer_id=str(customer.id))

        review = Review.submit(
            product_id=product.id,
            customer_id=customer.id,
            rating=command.rating,
            title=command.title,
            body=command.body,
        )
        current_domain.repository_for(Review).add(review)
        return str(review.id)

    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        repo._dao.delete(review)
