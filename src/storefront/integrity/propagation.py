"""Applies the propagation rules when a record is deleted.

Work happens in two phases. Planning walks the rule graph from the record
being deleted and collects everything to delete, everything to detach and
everything that blocks the delete; nothing is written. Only when no
restricting dependent survives the plan are the changes applied: detached
references are cleared first, then records are deleted children first.

Callers run inside a command handler, so the whole plan commits or rolls back
with the handler's unit of work.
"""

from dataclasses import dataclass, field

import structlog
from protean.utils.globals import current_domain
from protean.utils.reflection import id_field

from storefront.exceptions import ConstraintViolation
from storefront.integrity.rules import RULES, Policy, Rule, rules_for
from storefront.shared.queries import find_all
from storefront.utils.logging import log_context

logger = structlog.get_logger(__name__)


def identity_of(record) -> str:
    """The value of the record's identifier field, whatever that field is called."""
    return str(getattr(record, id_field(record).field_name))


def _key(record):
    return type(record).__name__, identity_of(record)


@dataclass
class Plan:
    root: object
    deletions: dict = field(default_factory=dict)
    detachments: list = field(default_factory=list)
    restrictions: list = field(default_factory=list)

    @property
    def blockers(self) -> list[tuple[Rule, object]]:
        """Restricting dependents that the plan does not delete anyway."""
        return [(rule, record) for rule, record in self.restrictions if _key(record) not in self.deletions]


def dependents_of(record, rule: Rule) -> list:
    if rule.collection is not None:
        return list(getattr(record, rule.collection))
    return find_all(rule.dependent, **{rule.field: identity_of(record)})


def plan(record, include_root=True, rules=RULES) -> Plan:
    """Work out the effect of deleting ``record`` without changing anything.

    With ``include_root`` off, the record's own rules are followed but the
    record itself is left out of the deletions; that is how entities already
    removed from their aggregate release what points at them.
    """
    result = Plan(root=record)

    def visit(current, delete=True):
        if delete:
            key = _key(current)
            if key in result.deletions:
                return
            result.deletions[key] = current

        for rule in rules_for(type(current), rules):
            for dependent in dependents_of(current, rule):
                if rule.policy is Policy.CASCADE:
                    visit(dependent)
                elif rule.policy is Policy.RESTRICT:
                    result.restrictions.append((rule, dependent))
                else:
                    result.detachments.append((rule, dependent))

    visit(record, delete=include_root)
    return result


def _check(result: Plan):
    blockers = result.blockers
    if not blockers:
        return

    root_name, root_id = _key(result.root)
    for rule, record in blockers:
        logger.warning(
            "delete_restricted",
            record=root_name,
            record_id=root_id,
            rule=rule.label,
            dependent_id=identity_of(record),
        )

    rule, _ = blockers[0]
    labels = sorted({rule.label for rule, _ in blockers})
    raise ConstraintViolation(
        {rule.dependent.__name__.lower(): [f"Cannot delete {root_name} {root_id}: still referenced ({', '.join(labels)})"]},
        rule=rule.label,
    )


def _detach(result: Plan):
    # One write per dependent, even when several of its fields are cleared
    pending = {}
    for rule, record in result.detachments:
        key = _key(record)
        if key in result.deletions:
            continue
        record, fields = pending.setdefault(key, (record, []))
        fields.append(rule.field)

    for record, fields in pending.values():
        for name in fields:
            setattr(record, name, None)
        current_domain.repository_for(type(record)).add(record)
        logger.info("reference_cleared", record=type(record).__name__, record_id=identity_of(record), fields=fields)


def _delete(result: Plan):
    for name, identifier in reversed(list(result.deletions)):
        record = result.deletions[(name, identifier)]
        current_domain.repository_for(type(record))._dao.delete(record)
        logger.debug("record_deleted", record=name, record_id=identifier)


def apply(result: Plan) -> Plan:
    _check(result)
    _detach(result)
    _delete(result)
    return result


def delete(record, rules=RULES) -> Plan:
    """Delete ``record`` together with everything its rules cascade to.

    Raises ``ConstraintViolation`` before any change when a restricting
    dependent exists.
    """
    name, identifier = _key(record)
    with log_context(cascade_root=name, cascade_root_id=identifier):
        result = apply(plan(record, rules=rules))
        logger.info(
            "record_deleted_with_dependents",
            record=name,
            record_id=identifier,
            deleted=len(result.deletions),
            detached=len(result.detachments),
        )
    return result


def release(record, rules=RULES) -> Plan:
    """Apply ``record``'s rules to its dependents, leaving ``record`` alone."""
    name, identifier = _key(record)
    with log_context(cascade_root=name, cascade_root_id=identifier):
        return apply(plan(record, include_root=False, rules=rules))
