"""Repository query helpers shared by every context.

Protean result sets are paginated, so lookups that feed cascades or
uniqueness checks read page by page until the store is exhausted.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.exceptions import ConstraintViolation

PAGE_SIZE = 100


def fetch_all(query, page_size=PAGE_SIZE):
    """Materialise every record matched by ``query``."""
    records = []
    offset = 0
    while True:
        page = query.limit(page_size).offset(offset).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size


def find_all(element_cls, **filters):
    """All records of ``element_cls`` whose fields equal ``filters``."""
    dao = current_domain.repository_for(element_cls)._dao
    query = dao.query.filter(**filters) if filters else dao.query
    return fetch_all(query)


def ensure_unique(element_cls, exclude_id=None, **values):
    """Reject the write when another record already holds ``values``.

    ``values`` with a ``None`` member are never considered duplicates, the way
    SQL unique indexes ignore NULLs.
    """
    if any(value is None for value in values.values()):
        return

    clashes = [record for record in find_all(element_cls, **values) if str(record.id) != str(exclude_id)]
    if clashes:
        fields = ", ".join(f"{field}={value!r}" for field, value in values.items())
        rule = "+".join(values)
        raise ConstraintViolation(
            {rule: [f"{element_cls.__name__} with {fields} already exists"]},
            rule=f"unique:{element_cls.__name__}.{rule}",
        )


def require(element_cls, identifier, field=None):
    """Load a referenced record or fail the way a foreign key would."""
    if identifier is not None:
        try:
            return current_domain.repository_for(element_cls).get(str(identifier))
        except ObjectNotFoundError:
            pass

    field = field or f"{element_cls.__name__.lower()}_id"
    raise ConstraintViolation(
        {field: [f"{element_cls.__name__} {identifier} does not exist"]},
        rule=f"reference:{element_cls.__name__}",
    )
