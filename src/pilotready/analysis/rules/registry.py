"""Rule evaluator registry: @register decorator, evaluate_all(), get_catalog()."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pilotready.models import RuleCatalogEntry, TriggeredRule

if TYPE_CHECKING:
    from pilotready.analysis.rules import RuleContext, RuleEvaluator

logger = logging.getLogger(__name__)

_EVALUATORS: dict[str, type[RuleEvaluator]] = {}

# Evaluation order is part of the decision: equal-point rules keep this order.
_RULE_MODULES = (
    "crosswind",
    "ceiling",
    "visibility",
    "gust_spread",
    "night_currency",
    "recency",
    "experience",
)


def register(cls: type[RuleEvaluator]) -> type[RuleEvaluator]:
    """Class decorator that registers a rule evaluator."""
    entry = cls.catalog_entry()
    _EVALUATORS[entry.id] = cls
    return cls


def get_catalog() -> list[RuleCatalogEntry]:
    """Return catalog entries for all registered rule categories."""
    return [cls.catalog_entry() for _, cls in _ordered()]


def evaluate_all(ctx: RuleContext) -> list[TriggeredRule]:
    """Evaluate every rule category against the context.

    Returns:
        Triggered rules in evaluation order. Categories that did not fire
        are omitted.
    """
    triggered: list[TriggeredRule] = []

    for rule_id, evaluator_cls in _ordered():
        result = evaluator_cls.evaluate(ctx)
        if result is not None:
            logger.debug("Rule %s fired: %s (+%d)", rule_id, result.rule, result.points)
            triggered.append(result)

    return triggered


_loaded = False


def _ensure_loaded() -> None:
    """Import all evaluator modules so @register decorators run, in order."""
    global _loaded
    if _loaded:
        return
    _loaded = True

    import importlib

    for name in _RULE_MODULES:
        importlib.import_module(f"pilotready.analysis.rules.{name}")


def _ordered() -> list[tuple[str, type[RuleEvaluator]]]:
    """Registered evaluators sorted by module order, then registration order."""
    _ensure_loaded()

    def module_rank(item: tuple[str, type[RuleEvaluator]]) -> int:
        module = item[1].__module__.rsplit(".", 1)[-1]
        return _RULE_MODULES.index(module) if module in _RULE_MODULES else len(_RULE_MODULES)

    return sorted(_EVALUATORS.items(), key=module_rank)
