"""BaseService — foundation for rulepred services.

Every service receives a :class:`RuleCatalog` at construction time and
reads rules through it. Rule file problems are turned into failed
results by :meth:`BaseService._load_rules`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rulepred.infrastructure.rule_source import RuleSourceError
from rulepred.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rulepred.domain.rules import RuleModel
    from rulepred.infrastructure.catalog import RuleCatalog

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class FilterService(BaseService):
            def filter_rules(self, ...) -> ServiceResult:
                rules = self._load_rules("filter_rules")
                if isinstance(rules, ServiceResult):
                    return rules
                ...
    """

    def __init__(self, catalog: RuleCatalog) -> None:
        self._catalog = catalog

    def _load_rules(self, op: str) -> list[RuleModel] | ServiceResult:
        """Return the catalog's rules, or a failed result for *op*."""
        try:
            return self._catalog.rules
        except RuleSourceError as exc:
            logger.debug("Could not load rules from %s: %s", exc.path, exc.message)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=exc.code,
                    message=exc.message,
                    detail={"path": str(exc.path)},
                ),
            )
